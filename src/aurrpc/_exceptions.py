"""Exceptions raised by the AUR RPC client."""

from __future__ import annotations

from typing import Self

from httpx import DecodingError, HTTPError
from pydantic import ValidationError

__all__ = [
    "AURDecodeError",
    "AURError",
    "AURPayloadError",
    "AURUnavailableError",
    "AURWebError",
]


class AURError(Exception):
    """Base class for all errors from the AUR RPC client."""

    def __init__(self, message: str) -> None:
        # Do not pass the arguments to the parent constructor, since derived
        # classes take different constructor arguments and that breaks
        # pickling. This requires implementing __str__.
        self.message = message

    def __str__(self) -> str:
        return self.message


class AURUnavailableError(AURError):
    """The AUR reported that it is temporarily unavailable.

    Raised based only on the HTTP status code. The body of the response is
    never examined. The caller may retry later.

    Parameters
    ----------
    status
        HTTP status code of the response.
    """

    def __init__(self, status: int) -> None:
        super().__init__("AUR is unavailable at this moment")
        self.status = status


class AURDecodeError(AURError):
    """The response body could not be decoded as an AUR RPC response.

    Parameters
    ----------
    status
        HTTP status code of the response.
    detail
        Error from decoding the body, either a validation error for a body
        that is not a valid AUR RPC response or an HTTPX error for a body
        whose content encoding is corrupt. This is also normally the
        ``__cause__`` of the exception.
    """

    def __init__(
        self, status: int, detail: ValidationError | DecodingError
    ) -> None:
        super().__init__(f"Cannot decode AUR response (status {status})")
        self.status = status
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.message}: {self.detail}"


class AURPayloadError(AURError):
    """The AUR returned an error message in the response.

    Parameters
    ----------
    status
        HTTP status code of the response.
    error
        Literal error message from the ``error`` field of the response, such
        as ``Too many package results.``.
    """

    def __init__(self, status: int, error: str) -> None:
        super().__init__(error)
        self.status = status

    def __str__(self) -> str:
        return f"status {self.status}: {self.message}"


class AURWebError(AURError):
    """Sending a request to the AUR failed at the network level.

    Parameters
    ----------
    message
        Exception string value.
    method
        Method of the request, if known.
    url
        URL of the request, if known.
    """

    @classmethod
    def from_exception(cls, exc: HTTPError) -> Self:
        """Create an exception from an HTTPX_ exception.

        Parameters
        ----------
        exc
            Exception from HTTPX.

        Returns
        -------
        AURWebError
            Newly-constructed exception.
        """
        exc_name = type(exc).__name__
        message = f"{exc_name}: {exc!s}" if str(exc) else exc_name

        # The request property of httpx.HTTPError raises RuntimeError if the
        # request was never set, so it cannot simply be checked for None.
        try:
            return cls(
                message, method=exc.request.method, url=str(exc.request.url)
            )
        except RuntimeError:
            return cls(message)

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url

    def __str__(self) -> str:
        if self.url:
            if self.method:
                return f"{self.message} ({self.method} {self.url})"
            return f"{self.message} ({self.url})"
        return self.message
