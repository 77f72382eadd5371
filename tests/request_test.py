"""Tests for building AUR RPC requests."""

from __future__ import annotations

import pytest

from aurrpc import (
    SearchField,
    build_info_params,
    build_rpc_request,
    build_search_params,
)


@pytest.mark.parametrize("field", list(SearchField))
def test_search_params(field: SearchField) -> None:
    params = build_search_params("some query", field)
    assert params["type"] == "search"
    assert params["arg"] == "some query"
    assert params["v"] == "5"
    if field == SearchField.unspecified:
        assert "by" not in params
    else:
        assert params["by"] == field.value
    assert str(params) == str(build_search_params("some query", field))


def test_search_params_default() -> None:
    params = build_search_params("cower")
    assert "by" not in params
    assert str(params) == "type=search&arg=cower&v=5"


def test_search_params_special_characters() -> None:
    params = build_search_params("c++ & friends=yes")
    assert params["arg"] == "c++ & friends=yes"


def test_info_params() -> None:
    params = build_info_params(["yay", "cower", "paru"])
    assert params["type"] == "info"
    assert params["v"] == "5"
    assert params.get_list("arg[]") == ["yay", "cower", "paru"]
    assert "arg" not in params

    params = build_info_params(iter(["cower"]))
    assert params.get_list("arg[]") == ["cower"]


def test_info_params_empty() -> None:
    params = build_info_params([])
    assert "arg[]" not in params
    assert params.get_list("arg[]") == []
    assert str(params) == "type=info&v=5"


def test_build_rpc_request() -> None:
    params = build_search_params("test-query", SearchField.name_only)
    request = build_rpc_request("https://aur.archlinux.org/rpc/", params)
    assert request.method == "GET"
    assert request.url.scheme == "https"
    assert request.url.host == "aur.archlinux.org"
    assert request.url.path == "/rpc/"
    assert dict(request.url.params) == {
        "type": "search",
        "arg": "test-query",
        "by": "name",
        "v": "5",
    }

    params = build_info_params(["test"])
    request = build_rpc_request("https://aur.archlinux.org/rpc.php?", params)
    assert request.url.path == "/rpc.php"
    assert request.url.params.get_list("arg[]") == ["test"]
    assert request.url.params["type"] == "info"
