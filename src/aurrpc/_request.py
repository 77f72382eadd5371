"""Construction of AUR RPC requests."""

from __future__ import annotations

from collections.abc import Iterable

from httpx import QueryParams, Request

from ._models import SearchField

__all__ = [
    "RPC_VERSION",
    "build_info_params",
    "build_rpc_request",
    "build_search_params",
]

RPC_VERSION = 5
"""Version of the AUR RPC interface sent with every request."""


def build_search_params(
    query: str, by: SearchField = SearchField.unspecified
) -> QueryParams:
    """Build the query parameters for a search.

    Parameters
    ----------
    query
        Search string, sent verbatim.
    by
        Field to search. If `SearchField.unspecified`, the ``by`` parameter
        is omitted and the AUR uses its default.

    Returns
    -------
    httpx.QueryParams
        Query parameters for the request.
    """
    params = [("type", "search"), ("arg", query)]
    if by != SearchField.unspecified:
        params.append(("by", by.value))
    params.append(("v", str(RPC_VERSION)))
    return QueryParams(params)


def build_info_params(names: Iterable[str]) -> QueryParams:
    """Build the query parameters for a package info lookup.

    Parameters
    ----------
    names
        Names of the packages, sent in order as repeated ``arg[]``
        parameters. May be empty.

    Returns
    -------
    httpx.QueryParams
        Query parameters for the request.
    """
    params = [("type", "info")]
    params.extend(("arg[]", name) for name in names)
    params.append(("v", str(RPC_VERSION)))
    return QueryParams(params)


def build_rpc_request(base_url: str, params: QueryParams) -> Request:
    """Build the GET request for an AUR RPC call.

    Parameters
    ----------
    base_url
        URL of the AUR RPC endpoint.
    params
        Query parameters from `build_search_params` or
        `build_info_params`.

    Returns
    -------
    httpx.Request
        Request ready to be sent with an ``httpx.AsyncClient``.
    """
    return Request("GET", base_url, params=params)
