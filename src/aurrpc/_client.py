"""Client for the AUR RPC interface."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Iterable
from types import TracebackType
from typing import Self, TypeAlias

import httpx
import structlog
from structlog.stdlib import BoundLogger

from ._config import (
    DEFAULT_BASE_URL,
    DEFAULT_HTTP_TIMEOUT,
    AURClientConfig,
    normalize_base_url,
)
from ._exceptions import AURWebError
from ._models import PackageRecord, SearchField
from ._request import (
    build_info_params,
    build_rpc_request,
    build_search_params,
)
from ._response import parse_rpc_response

__all__ = [
    "AURClient",
    "RequestHook",
    "header_hook",
]

RequestHook: TypeAlias = Callable[[httpx.Request], Awaitable[None] | None]
"""Callable that may inspect or modify a request before it is sent.

Hooks may be regular functions or coroutine functions. Any exception raised
by a hook aborts the call and is propagated unchanged.
"""


def header_hook(name: str, value: str) -> RequestHook:
    """Create a request hook that sets a header on every request.

    Parameters
    ----------
    name
        Name of the header.
    value
        Value of the header.

    Returns
    -------
    RequestHook
        Hook suitable for passing to `AURClient`.
    """

    def set_header(request: httpx.Request) -> None:
        request.headers[name] = value

    return set_header


class AURClient:
    """Search and query packages in the Arch User Repository.

    Each method sends exactly one request to the AUR and does not retry.
    The client holds no state other than its configuration and may be
    shared between concurrent tasks, provided the HTTP client and request
    hooks are also safe to share.

    Parameters
    ----------
    base_url
        Base URL of the AUR RPC endpoint. A trailing slash is added if the
        URL does not end in ``/`` or ``?``.
    http_client
        HTTP client to use. If not given, a client is created and closed by
        `aclose`. A provided client is never closed by this object.
    request_hooks
        Hooks run, in order, on every request before it is sent.
    logger
        Logger for debug messages. Defaults to the ``aurrpc`` logger.

    Raises
    ------
    httpx.InvalidURL
        Raised if the base URL cannot be parsed.

    Examples
    --------
    .. code-block:: python

       async with AURClient() as client:
           packages = await client.search("cower", SearchField.name_only)
    """

    @classmethod
    def from_config(
        cls,
        config: AURClientConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
        request_hooks: Iterable[RequestHook] = (),
        logger: BoundLogger | None = None,
    ) -> Self:
        """Create a client from settings.

        Parameters
        ----------
        config
            Client settings.
        http_client
            HTTP client to use. If not given, one is created with the
            timeout from the settings.
        request_hooks
            Additional hooks, run after the ``User-Agent`` hook if one is
            configured.
        logger
            Logger for debug messages.

        Returns
        -------
        AURClient
            Newly-created client.
        """
        hooks: list[RequestHook] = []
        if config.user_agent:
            hooks.append(header_hook("User-Agent", config.user_agent))
        hooks.extend(request_hooks)
        owns_http_client = http_client is None
        client = cls(
            base_url=config.base_url,
            http_client=http_client or _create_http_client(config.timeout),
            request_hooks=hooks,
            logger=logger,
        )
        client._owns_http_client = owns_http_client
        return client

    def __init__(
        self,
        *,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        request_hooks: Iterable[RequestHook] = (),
        logger: BoundLogger | None = None,
    ) -> None:
        self._base_url = normalize_base_url(base_url or DEFAULT_BASE_URL)
        # Reject URLs that cannot be parsed before any request is built.
        httpx.URL(self._base_url)
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = _create_http_client(DEFAULT_HTTP_TIMEOUT)
        self._http_client = http_client
        self._request_hooks = tuple(request_hooks)
        self._logger = logger or structlog.get_logger("aurrpc")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    @property
    def base_url(self) -> str:
        """Normalized base URL of the AUR RPC endpoint."""
        return self._base_url

    @property
    def request_hooks(self) -> tuple[RequestHook, ...]:
        """Hooks run on every request, in order."""
        return self._request_hooks

    async def aclose(self) -> None:
        """Close the HTTP client if it was created by this object."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def search(
        self,
        query: str,
        by: SearchField | str = SearchField.unspecified,
        *,
        request_hooks: Iterable[RequestHook] = (),
    ) -> list[PackageRecord]:
        """Search for packages.

        Parameters
        ----------
        query
            Search string.
        by
            Field to search, either a `SearchField` or its token. The
            default lets the AUR choose, which is currently ``name-desc``.
        request_hooks
            Hooks to run on this request after the client-wide hooks.

        Returns
        -------
        list of PackageRecord
            Matching packages, which may be empty.

        Raises
        ------
        AURError
            Raised if the AUR could not be reached or returned an error.
        ValueError
            Raised if ``by`` is not a valid search field.
        """
        params = build_search_params(query, SearchField(by))
        return await self._get(params, request_hooks)

    async def info(
        self,
        names: Iterable[str],
        *,
        request_hooks: Iterable[RequestHook] = (),
    ) -> list[PackageRecord]:
        """Get detailed information about packages.

        Parameters
        ----------
        names
            Names of packages to look up. Names that don't exist are
            silently left out of the results.
        request_hooks
            Hooks to run on this request after the client-wide hooks.

        Returns
        -------
        list of PackageRecord
            Information about the packages that were found.

        Raises
        ------
        AURError
            Raised if the AUR could not be reached or returned an error.
        """
        return await self._get(build_info_params(names), request_hooks)

    async def orphans(
        self, *, request_hooks: Iterable[RequestHook] = ()
    ) -> list[PackageRecord]:
        """List packages with no maintainer.

        Parameters
        ----------
        request_hooks
            Hooks to run on this request after the client-wide hooks.

        Returns
        -------
        list of PackageRecord
            Orphaned packages.

        Raises
        ------
        AURError
            Raised if the AUR could not be reached or returned an error.
        """
        return await self.search(
            "", SearchField.maintainer, request_hooks=request_hooks
        )

    async def _get(
        self, params: httpx.QueryParams, hooks: Iterable[RequestHook]
    ) -> list[PackageRecord]:
        request = build_rpc_request(self._base_url, params)
        for hook in (*self._request_hooks, *hooks):
            result = hook(request)
            if inspect.isawaitable(result):
                await result

        logger = self._logger.bind(url=str(request.url))
        logger.debug("Sending AUR RPC request")
        try:
            response = await self._http_client.send(request, stream=True)
            logger.debug(
                "Received AUR RPC response", status=response.status_code
            )
            return await parse_rpc_response(response)
        except httpx.HTTPError as e:
            raise AURWebError.from_exception(e) from e


def _create_http_client(timeout: float) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=timeout, follow_redirects=True)
