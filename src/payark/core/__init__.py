"""
Core primitives: configuration, the request pipeline, schemas and resources.
"""

from .client import PayArk
from .config import (
    DEFAULT_BASE_URL,
    ConfigError,
    PayArkConfig,
    load_config,
)
from .environment import PayArkEnvironment, build_environment, read_env_file
from .errors import ErrorCode, PayArkDecodeError, PayArkError, map_status_to_code
from .http import SDK_VERSION, request
from .resources import Checkout, ListPaymentsParams, Payments, Projects
from .schemas import (
    CheckoutSession,
    CheckoutSessionId,
    CreateCheckoutParams,
    PaginatedResponse,
    PaginationMeta,
    Payment,
    PaymentId,
    PaymentMethod,
    PaymentStatus,
    Project,
    ProjectId,
    Provider,
    decode,
)

__all__ = [
    "Checkout",
    "CheckoutSession",
    "CheckoutSessionId",
    "ConfigError",
    "CreateCheckoutParams",
    "DEFAULT_BASE_URL",
    "ErrorCode",
    "ListPaymentsParams",
    "PaginatedResponse",
    "PaginationMeta",
    "PayArk",
    "PayArkConfig",
    "PayArkDecodeError",
    "PayArkEnvironment",
    "PayArkError",
    "Payment",
    "PaymentId",
    "PaymentMethod",
    "PaymentStatus",
    "Payments",
    "Project",
    "ProjectId",
    "Projects",
    "Provider",
    "SDK_VERSION",
    "build_environment",
    "decode",
    "load_config",
    "map_status_to_code",
    "read_env_file",
    "request",
]
