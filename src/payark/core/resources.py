"""
Resource facades: each one fixes the path and response schema for a handful
of API operations and delegates the call to :func:`payark.core.http.request`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import quote

import requests
from pydantic import ValidationError

from .config import PayArkConfig
from .errors import ErrorCode, PayArkError
from .http import request
from .schemas import (
    CheckoutSession,
    CreateCheckoutParams,
    PaginatedResponse,
    Payment,
    Project,
    decode,
)

__all__ = [
    "Checkout",
    "ListPaymentsParams",
    "Payments",
    "Projects",
]


class _Resource:
    def __init__(
        self,
        config: PayArkConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session

    def _request(self, method: str, path: str, **options: Any) -> Any:
        return request(method, path, self.config, session=self.session, **options)


class Checkout(_Resource):
    """Checkout sessions."""

    def create(
        self,
        params: Union[CreateCheckoutParams, Mapping[str, Any]],
    ) -> CheckoutSession:
        """
        Create a checkout session.

        ``params`` may be a :class:`CreateCheckoutParams` or a mapping using
        either the Python (``return_url``) or wire (``returnUrl``) field names.
        Invalid parameters raise :class:`PayArkError` without a network call.
        """
        if not isinstance(params, CreateCheckoutParams):
            try:
                params = CreateCheckoutParams.model_validate(dict(params))
            except ValidationError as exc:
                raise PayArkError(
                    f"Invalid request body: {exc}",
                    status_code=400,
                    code=ErrorCode.INVALID_REQUEST_ERROR,
                ) from exc

        payload = self._request("POST", "/v1/checkout", body=params.to_body())
        return decode(CheckoutSession, payload)


@dataclass(frozen=True)
class ListPaymentsParams:
    limit: Optional[int] = None
    offset: Optional[int] = None
    project_id: Optional[str] = None

    def as_query(self) -> Dict[str, Any]:
        return {
            "limit": self.limit,
            "offset": self.offset,
            "projectId": self.project_id,
        }


class Payments(_Resource):
    """Payments recorded for the authenticated project."""

    def list(
        self,
        params: Optional[ListPaymentsParams] = None,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        project_id: Optional[str] = None,
    ) -> PaginatedResponse[Payment]:
        if params is not None:
            if any(item is not None for item in (limit, offset, project_id)):
                raise ValueError(
                    "Provide either ListPaymentsParams or individual parameters, not both."
                )
        else:
            params = ListPaymentsParams(limit=limit, offset=offset, project_id=project_id)

        payload = self._request("GET", "/v1/payments", query=params.as_query())
        return decode(PaginatedResponse[Payment], payload)

    def retrieve(self, payment_id: str) -> Payment:
        path = f"/v1/payments/{quote(payment_id, safe='')}"
        return decode(Payment, self._request("GET", path))


class Projects(_Resource):
    """Projects belonging to the authenticated account."""

    def list(self) -> List[Project]:
        return decode(List[Project], self._request("GET", "/v1/projects"))
