"""
Python client for the PayArk payment gateway API.

The most useful pieces are re-exported here so integrators can
``from payark import ...`` without navigating the package.
"""

from .api import create_client
from .core import (
    SDK_VERSION,
    Checkout,
    CheckoutSession,
    CheckoutSessionId,
    ConfigError,
    CreateCheckoutParams,
    ErrorCode,
    ListPaymentsParams,
    PaginatedResponse,
    PaginationMeta,
    PayArk,
    PayArkConfig,
    PayArkDecodeError,
    PayArkError,
    Payment,
    PaymentId,
    PaymentMethod,
    PaymentStatus,
    Payments,
    Project,
    ProjectId,
    Projects,
    Provider,
    load_config,
)

__version__ = SDK_VERSION

__all__ = (
    "Checkout",
    "CheckoutSession",
    "CheckoutSessionId",
    "ConfigError",
    "CreateCheckoutParams",
    "ErrorCode",
    "ListPaymentsParams",
    "PaginatedResponse",
    "PaginationMeta",
    "PayArk",
    "PayArkConfig",
    "PayArkDecodeError",
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
    "create_client",
    "load_config",
)
