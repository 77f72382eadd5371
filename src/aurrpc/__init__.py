"""Client for the Arch User Repository (AUR) RPC interface."""

from importlib.metadata import PackageNotFoundError, version

from ._client import AURClient, RequestHook, header_hook
from ._config import (
    DEFAULT_BASE_URL,
    DEFAULT_HTTP_TIMEOUT,
    AURClientConfig,
    normalize_base_url,
)
from ._exceptions import (
    AURDecodeError,
    AURError,
    AURPayloadError,
    AURUnavailableError,
    AURWebError,
)
from ._models import PackageRecord, RPCResponse, SearchField
from ._request import (
    RPC_VERSION,
    build_info_params,
    build_rpc_request,
    build_search_params,
)
from ._response import (
    UNAVAILABLE_STATUS_CODES,
    classify_status,
    decode_rpc_body,
    parse_rpc_response,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_HTTP_TIMEOUT",
    "RPC_VERSION",
    "UNAVAILABLE_STATUS_CODES",
    "AURClient",
    "AURClientConfig",
    "AURDecodeError",
    "AURError",
    "AURPayloadError",
    "AURUnavailableError",
    "AURWebError",
    "PackageRecord",
    "RPCResponse",
    "RequestHook",
    "SearchField",
    "__version__",
    "build_info_params",
    "build_rpc_request",
    "build_search_params",
    "classify_status",
    "decode_rpc_body",
    "header_hook",
    "normalize_base_url",
    "parse_rpc_response",
]

__version__: str
"""The version string of aurrpc (PEP 440 / SemVer compatible)."""

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0"
