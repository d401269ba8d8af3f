import json
from typing import Any, List, Optional

import pytest
import requests

from payark import PayArkConfig


def make_response(status: int = 200, body: Any = None, *, text: Optional[str] = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    if text is not None:
        response._content = text.encode("utf-8")
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = b""
    response.headers["Content-Type"] = "application/json"
    return response


class FakeSession:
    """Stands in for ``requests.Session`` and records every call."""

    def __init__(self, response: Any = None, *, error: Optional[Exception] = None) -> None:
        self.response = response if response is not None else make_response(200, {})
        self.error = error
        self.calls: List[dict] = []
        self.closed = False

    def request(self, method, url, headers=None, data=None, timeout=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": dict(headers or {}),
                "data": data,
                "timeout": timeout,
            }
        )
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> dict:
        return self.calls[-1]


@pytest.fixture
def config() -> PayArkConfig:
    return PayArkConfig(api_key="sk_test_123")


@pytest.fixture
def payment_body() -> dict:
    return {
        "id": "pay_1",
        "project_id": "p1",
        "amount": 100,
        "currency": "NPR",
        "status": "success",
        "created_at": "2024-01-01T00:00:00Z",
    }
