"""Configuration for the AUR RPC client."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_HTTP_TIMEOUT",
    "AURClientConfig",
    "normalize_base_url",
]

DEFAULT_BASE_URL = "https://aur.archlinux.org/rpc/"
"""URL of the production AUR RPC endpoint."""

DEFAULT_HTTP_TIMEOUT = 20.0
"""Timeout (in seconds) of the HTTP client created by default.

This only applies when the client creates its own ``httpx.AsyncClient``.
An injected client keeps whatever timeout it was configured with.
"""


def normalize_base_url(url: str) -> str:
    """Ensure a base URL ends in a separator before query parameters.

    URLs already ending in ``/`` or ``?`` (such as the older
    ``https://aur.archlinux.org/rpc.php?`` form) are returned unchanged.
    Anything else gets a trailing slash.

    Parameters
    ----------
    url
        Base URL of the AUR RPC endpoint.

    Returns
    -------
    str
        Normalized URL.
    """
    if url.endswith(("/", "?")):
        return url
    return url + "/"


class AURClientConfig(BaseSettings):
    """Settings for an `~aurrpc.AURClient`.

    Each setting may be given as an environment variable with an ``AUR_``
    prefix.
    """

    model_config = SettingsConfigDict(env_prefix="AUR_", frozen=True)

    base_url: Annotated[str, AfterValidator(normalize_base_url)] = Field(
        DEFAULT_BASE_URL,
        title="AUR RPC URL",
        description="Base URL of the AUR RPC endpoint",
        examples=["https://aur.archlinux.org/rpc/"],
    )

    timeout: float = Field(
        DEFAULT_HTTP_TIMEOUT,
        title="HTTP timeout",
        description=(
            "Timeout in seconds for the HTTP client created by the AUR"
            " client. Ignored if an HTTP client is provided."
        ),
        gt=0,
    )

    user_agent: str | None = Field(
        None,
        title="User-Agent",
        description="If set, sent as the User-Agent header of each request",
        examples=["my-aur-helper/1.0"],
    )
