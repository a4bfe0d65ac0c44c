"""scalr_client package exports."""

from .client import DEFAULT_ADDRESS, DEFAULT_BASE_PATH, ScalrClient
from .config import ClientConfig, create_client_from_env, load_env_config
from .errors import (
    DecodingError,
    InvalidIdentifierError,
    OptionsValidationError,
    Problem,
    RequestEncodingError,
    ResourceNotFoundError,
    ScalrClientError,
    ScalrHTTPError,
    ServerValidationError,
    UnauthorizedError,
    UnexpectedResponseError,
)
from .logging import setup_logging
from .models import (
    Account,
    Agent,
    IdentityProvider,
    ListOptions,
    Permission,
    Resource,
    ResourceOptions,
    ServiceAccount,
    User,
    VcsProvider,
    Workspace,
)
from .pagination import Page, Pagination, paginate
from .request import RequestDescriptor, build_request, resource_path
from .validation import PREFIXED_ID, STRING_ID, is_valid_identifier, is_valid_name

__all__ = [
    # Client
    "ScalrClient",
    "DEFAULT_ADDRESS",
    "DEFAULT_BASE_PATH",
    # Config
    "ClientConfig",
    "create_client_from_env",
    "load_env_config",
    "setup_logging",
    # Exceptions
    "ScalrClientError",
    "InvalidIdentifierError",
    "OptionsValidationError",
    "RequestEncodingError",
    "DecodingError",
    "ScalrHTTPError",
    "ResourceNotFoundError",
    "ServerValidationError",
    "UnexpectedResponseError",
    "UnauthorizedError",
    "Problem",
    # Kernel
    "RequestDescriptor",
    "build_request",
    "resource_path",
    "Page",
    "Pagination",
    "paginate",
    "STRING_ID",
    "PREFIXED_ID",
    "is_valid_identifier",
    "is_valid_name",
    # Models
    "Resource",
    "ResourceOptions",
    "ListOptions",
    "Account",
    "Agent",
    "IdentityProvider",
    "Permission",
    "ServiceAccount",
    "User",
    "VcsProvider",
    "Workspace",
]
