"""Pydantic models for the AUR RPC interface."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Annotated, Any, TypeAlias

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

__all__ = [
    "PackageRecord",
    "RPCResponse",
    "SearchField",
]


class SearchField(StrEnum):
    """Field an AUR search matches against.

    The value of each member is the token sent as the ``by`` query
    parameter. Constructing the enum from an unknown string raises
    `ValueError`.
    """

    name_only = "name"
    """Package name only."""

    name_desc = "name-desc"
    """Package name and description, the service default."""

    maintainer = "maintainer"
    """Maintainer username. An empty query matches orphaned packages."""

    depends = "depends"
    make_depends = "makedepends"
    opt_depends = "optdepends"
    check_depends = "checkdepends"

    unspecified = ""
    """Omit the ``by`` parameter and let the service choose."""


def _none_to_empty_list(v: Any) -> Any:
    """Pydantic validator mapping a null list to an empty list."""
    if v is None:
        return []
    return v


def _none_to_empty_string(v: Any) -> Any:
    """Pydantic validator mapping a null string to an empty string."""
    if v is None:
        return ""
    return v


LabelList: TypeAlias = Annotated[
    list[str], BeforeValidator(_none_to_empty_list)
]
"""List of strings where a null value is treated as an empty list."""

NullableText: TypeAlias = Annotated[
    str, BeforeValidator(_none_to_empty_string)
]
"""String where a null value is treated as an empty string."""


def _to_datetime(v: int | None) -> datetime | None:
    if v is None:
        return None
    return datetime.fromtimestamp(v, tz=UTC)


class PackageRecord(BaseModel):
    """One package as returned by the AUR RPC interface.

    Fields may be given either by their attribute names or by the
    capitalized names used by the AUR. Every list field is always a list,
    whether the AUR omitted it, returned ``null``, or returned an empty list.
    Only ``out_of_date`` and ``maintainer`` may be `None`.
    """

    model_config = ConfigDict(
        extra="ignore", frozen=True, populate_by_name=True
    )

    id: int = Field(0, title="Package ID", alias="ID", examples=[229417])

    name: str = Field(
        "", title="Package name", alias="Name", examples=["cower"]
    )

    package_base_id: int = Field(
        0, title="Package base ID", alias="PackageBaseID", examples=[44921]
    )

    package_base: str = Field(
        "", title="Package base", alias="PackageBase", examples=["cower"]
    )

    version: str = Field(
        "", title="Version", alias="Version", examples=["14-2"]
    )

    description: NullableText = Field(
        "", title="Description", alias="Description"
    )

    url: NullableText = Field(
        "",
        title="Upstream URL",
        alias="URL",
        examples=["http://github.com/falconindy/cower"],
    )

    num_votes: int = Field(0, title="Number of votes", alias="NumVotes")

    popularity: float = Field(0.0, title="Popularity", alias="Popularity")

    out_of_date: int | None = Field(
        None,
        title="Flagged out of date",
        description=(
            "When the package was flagged out of date, in seconds since"
            " epoch, or null if it is not flagged."
        ),
        alias="OutOfDate",
    )

    maintainer: str | None = Field(
        None,
        title="Maintainer",
        description="Null if the package is orphaned.",
        alias="Maintainer",
    )

    first_submitted: int = Field(
        0,
        title="First submitted",
        description="Seconds since epoch",
        alias="FirstSubmitted",
    )

    last_modified: int = Field(
        0,
        title="Last modified",
        description="Seconds since epoch",
        alias="LastModified",
    )

    url_path: str = Field(
        "",
        title="Snapshot path",
        description="Path of the snapshot tarball relative to the AUR host",
        alias="URLPath",
        examples=["/cgit/aur.git/snapshot/cower.tar.gz"],
    )

    depends: LabelList = Field([], title="Dependencies", alias="Depends")

    make_depends: LabelList = Field(
        [], title="Build dependencies", alias="MakeDepends"
    )

    check_depends: LabelList = Field(
        [], title="Check dependencies", alias="CheckDepends"
    )

    opt_depends: LabelList = Field(
        [],
        title="Optional dependencies",
        description=(
            "Entries may carry a description after a colon, which is kept"
            " as part of the string."
        ),
        alias="OptDepends",
    )

    conflicts: LabelList = Field([], title="Conflicts", alias="Conflicts")

    provides: LabelList = Field([], title="Provides", alias="Provides")

    replaces: LabelList = Field([], title="Replaces", alias="Replaces")

    groups: LabelList = Field([], title="Groups", alias="Groups")

    license: LabelList = Field([], title="Licenses", alias="License")

    keywords: LabelList = Field([], title="Keywords", alias="Keywords")

    @property
    def is_orphaned(self) -> bool:
        """Whether the package has no maintainer."""
        return not self.maintainer

    @property
    def is_out_of_date(self) -> bool:
        """Whether the package has been flagged out of date."""
        return self.out_of_date is not None

    @property
    def first_submitted_at(self) -> datetime:
        """Submission time as a timezone-aware UTC datetime."""
        return datetime.fromtimestamp(self.first_submitted, tz=UTC)

    @property
    def last_modified_at(self) -> datetime:
        """Last modification time as a timezone-aware UTC datetime."""
        return datetime.fromtimestamp(self.last_modified, tz=UTC)

    @property
    def out_of_date_at(self) -> datetime | None:
        """When the package was flagged out of date, if it was."""
        return _to_datetime(self.out_of_date)


class RPCResponse(BaseModel):
    """Envelope wrapping every AUR RPC response."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    error: NullableText = Field("", title="Error message")

    type: str = Field("", title="Result type", examples=["multiinfo"])

    version: int | None = Field(None, title="RPC version", examples=[5])

    resultcount: int = Field(0, title="Number of results")

    results: Annotated[
        list[PackageRecord], BeforeValidator(_none_to_empty_list)
    ] = Field([], title="Results")
