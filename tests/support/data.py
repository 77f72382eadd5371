"""Access to test data files."""

from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter

from aurrpc import PackageRecord

__all__ = ["read_test_data", "read_test_packages"]

_DATA_PATH = Path(__file__).parent.parent / "data"


def read_test_data(filename: str) -> str:
    """Read a file from the test data directory."""
    return (_DATA_PATH / filename).read_text()


def read_test_packages() -> list[PackageRecord]:
    """Read the packages known to the mock AUR."""
    adapter = TypeAdapter(list[PackageRecord])
    return adapter.validate_json(read_test_data("packages.json"))
