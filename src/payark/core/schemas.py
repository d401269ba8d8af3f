"""
Response and request shapes for the PayArk API.

Responses are validated strictly: required fields must be present with the
declared types, enumerations are closed and nothing is coerced. Unknown
fields are ignored.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Literal, NewType, Optional, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    TypeAdapter,
    ValidationError,
)

from .errors import PayArkDecodeError

__all__ = [
    "CheckoutSession",
    "CheckoutSessionId",
    "CreateCheckoutParams",
    "PaginatedResponse",
    "PaginationMeta",
    "Payment",
    "PaymentId",
    "PaymentMethod",
    "PaymentStatus",
    "Project",
    "ProjectId",
    "Provider",
    "PROVIDERS",
    "decode",
]

Provider = Literal["esewa", "khalti", "connectips", "imepay", "fonepay", "sandbox"]
PROVIDERS = ("esewa", "khalti", "connectips", "imepay", "fonepay", "sandbox")

PaymentStatus = Literal["pending", "success", "failed"]

# JSON number; ints stay ints.
Number = Union[StrictInt, StrictFloat]

# Distinct id types; not interchangeable for type checkers.
CheckoutSessionId = NewType("CheckoutSessionId", str)
PaymentId = NewType("PaymentId", str)
ProjectId = NewType("ProjectId", str)

T = TypeVar("T")


class _ResponseModel(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)


class PaymentMethod(_ResponseModel):
    type: Provider
    url: Optional[str] = None
    method: Optional[Literal["GET", "POST"]] = None
    fields: Optional[Dict[str, str]] = None


class CheckoutSession(_ResponseModel):
    id: CheckoutSessionId
    checkout_url: str
    payment_method: PaymentMethod


class Payment(_ResponseModel):
    id: PaymentId
    project_id: ProjectId
    amount: Number
    currency: str
    status: PaymentStatus
    provider_ref: Optional[str] = None
    metadata_json: Optional[Dict[str, Any]] = None
    gateway_response: Optional[Dict[str, Any]] = None
    created_at: str
    updated_at: Optional[str] = None


class Project(_ResponseModel):
    id: ProjectId
    name: str
    api_key_secret: str
    created_at: str


class PaginationMeta(_ResponseModel):
    total: Optional[Number]
    limit: Number
    offset: Number


class PaginatedResponse(_ResponseModel, Generic[T]):
    data: List[T]
    meta: PaginationMeta


class CreateCheckoutParams(BaseModel):
    """
    Parameters accepted by ``POST /v1/checkout``.

    Field names follow Python conventions; :meth:`to_body` renders the
    camelCase keys the API expects.
    """

    model_config = ConfigDict(strict=True, populate_by_name=True, frozen=True)

    amount: Number
    currency: str = "NPR"
    provider: Provider
    return_url: str = Field(alias="returnUrl")
    cancel_url: Optional[str] = Field(default=None, alias="cancelUrl")
    metadata: Optional[Dict[str, Any]] = None

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def _schema_name(schema: Any) -> str:
    return getattr(schema, "__name__", None) or str(schema)


def decode(schema: Any, payload: Any) -> Any:
    """
    Validate ``payload`` against ``schema`` and return the decoded value.

    ``schema`` may be a model class or any type understood by
    :class:`pydantic.TypeAdapter` (e.g. ``List[Project]``).

    Raises :class:`PayArkDecodeError` when the payload does not match.
    """
    try:
        if isinstance(schema, type) and issubclass(schema, BaseModel):
            return schema.model_validate(payload)
        return TypeAdapter(schema).validate_python(payload, strict=True)
    except ValidationError as exc:
        raise PayArkDecodeError(
            _schema_name(schema),
            exc.errors(include_url=False),
            payload,
        ) from exc
