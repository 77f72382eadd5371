"""Classification and decoding of AUR RPC responses."""

from __future__ import annotations

from httpx import DecodingError, Response, codes
from pydantic import ValidationError

from ._exceptions import (
    AURDecodeError,
    AURPayloadError,
    AURUnavailableError,
)
from ._models import PackageRecord, RPCResponse

__all__ = [
    "UNAVAILABLE_STATUS_CODES",
    "classify_status",
    "decode_rpc_body",
    "parse_rpc_response",
]

UNAVAILABLE_STATUS_CODES = frozenset(
    {codes.BAD_GATEWAY, codes.SERVICE_UNAVAILABLE, codes.GATEWAY_TIMEOUT}
)
"""Status codes meaning the AUR is temporarily unavailable."""


def classify_status(status: int) -> None:
    """Check the status code of a response before reading its body.

    Parameters
    ----------
    status
        HTTP status code.

    Raises
    ------
    AURUnavailableError
        Raised if the status code indicates the AUR is temporarily down.
    """
    if status in UNAVAILABLE_STATUS_CODES:
        raise AURUnavailableError(status)


def decode_rpc_body(status: int, body: bytes | str) -> list[PackageRecord]:
    """Decode the body of an AUR RPC response.

    An error message in the response takes precedence over any results it
    may also contain. An empty result list is a successful response.

    Parameters
    ----------
    status
        HTTP status code of the response, used only for error reporting.
    body
        Raw body of the response.

    Returns
    -------
    list of PackageRecord
        Packages returned by the AUR.

    Raises
    ------
    AURDecodeError
        Raised if the body is not valid JSON or is not shaped like an AUR
        RPC response.
    AURPayloadError
        Raised if the response contains an error message.
    """
    try:
        result = RPCResponse.model_validate_json(body)
    except ValidationError as e:
        raise AURDecodeError(status, e) from e
    if result.error:
        raise AURPayloadError(status, result.error)
    return result.results


async def parse_rpc_response(response: Response) -> list[PackageRecord]:
    """Turn an AUR RPC response into a list of packages.

    The status code is checked first, then the body is read and decoded.
    The response is closed on return, whether or not this succeeds, so it
    may be a streaming response.

    Parameters
    ----------
    response
        Response from the AUR.

    Returns
    -------
    list of PackageRecord
        Packages returned by the AUR.

    Raises
    ------
    AURDecodeError
        Raised if the body could not be decoded, including if its content
        encoding is corrupt.
    AURPayloadError
        Raised if the response contains an error message.
    AURUnavailableError
        Raised if the AUR is temporarily unavailable.
    """
    try:
        classify_status(response.status_code)
        try:
            body = await response.aread()
        except DecodingError as e:
            raise AURDecodeError(response.status_code, e) from e
        return decode_rpc_body(response.status_code, body)
    finally:
        await response.aclose()
