import json

import pytest
import requests

from conftest import FakeSession, make_response
from payark import (
    CreateCheckoutParams,
    ErrorCode,
    ListPaymentsParams,
    PayArk,
    PayArkDecodeError,
    PayArkError,
)


def test_create_checkout_session(config):
    body = {
        "id": "cs_123",
        "checkout_url": "https://pay.ark/cs_123",
        "payment_method": {"type": "esewa"},
    }
    session = FakeSession(make_response(200, body))
    client = PayArk(config, session=session)

    result = client.checkout.create(
        {"amount": 1000, "provider": "esewa", "returnUrl": "https://example.com/success"}
    )

    assert result.id == "cs_123"
    assert result.payment_method.type == "esewa"
    assert result.model_dump(exclude_none=True) == body
    assert session.last["method"] == "POST"
    assert session.last["url"] == "https://api.payark.com/v1/checkout"
    assert json.loads(session.last["data"]) == {
        "amount": 1000,
        "currency": "NPR",
        "provider": "esewa",
        "returnUrl": "https://example.com/success",
    }


def test_invalid_checkout_params_are_rejected_locally(config):
    session = FakeSession()
    client = PayArk(config, session=session)

    with pytest.raises(PayArkError) as excinfo:
        client.checkout.create({"amount": 1000, "provider": "paypal", "returnUrl": "r"})

    assert excinfo.value.code is ErrorCode.INVALID_REQUEST_ERROR
    assert session.calls == []


def test_whole_amounts_are_sent_unchanged(config):
    body = {"id": "cs_1", "checkout_url": "u", "payment_method": {"type": "esewa"}}
    session = FakeSession(make_response(200, body))
    client = PayArk(config, session=session)

    client.checkout.create({"amount": 1000, "provider": "esewa", "returnUrl": "r"})
    assert '"amount": 1000,' in session.last["data"]

    client.checkout.create({"amount": 12.5, "provider": "esewa", "returnUrl": "r"})
    assert '"amount": 12.5,' in session.last["data"]


@pytest.mark.parametrize("amount", ["1000", True, None])
def test_non_numeric_amount_is_rejected(config, amount):
    session = FakeSession()
    client = PayArk(config, session=session)

    with pytest.raises(PayArkError) as excinfo:
        client.checkout.create({"amount": amount, "provider": "esewa", "returnUrl": "r"})

    assert excinfo.value.code is ErrorCode.INVALID_REQUEST_ERROR
    assert excinfo.value.status_code == 400
    assert session.calls == []


def test_list_payments(config, payment_body):
    session = FakeSession(
        make_response(200, {"data": [payment_body], "meta": {"total": 1, "limit": 10, "offset": 0}})
    )
    client = PayArk(config, session=session)

    page = client.payments.list()

    assert len(page.data) == 1
    assert page.data[0].id == "pay_1"
    assert page.meta.total == 1
    assert session.last["url"] == "https://api.payark.com/v1/payments"


def test_list_payments_query(config, payment_body):
    session = FakeSession(
        make_response(200, {"data": [], "meta": {"total": 0, "limit": 5, "offset": 10}})
    )
    client = PayArk(config, session=session)

    client.payments.list(limit=5, offset=10, project_id="p1")
    assert session.last["url"] == "https://api.payark.com/v1/payments?limit=5&offset=10&projectId=p1"

    client.payments.list(ListPaymentsParams(limit=5))
    assert session.last["url"] == "https://api.payark.com/v1/payments?limit=5"


def test_list_payments_rejects_mixed_arguments(config):
    client = PayArk(config, session=FakeSession())
    with pytest.raises(ValueError):
        client.payments.list(ListPaymentsParams(limit=5), offset=3)


def test_list_payments_unknown_status_is_decode_error(config, payment_body):
    body = {
        "data": [dict(payment_body, status="completed")],
        "meta": {"total": 1, "limit": 10, "offset": 0},
    }
    client = PayArk(config, session=FakeSession(make_response(200, body)))

    with pytest.raises(PayArkDecodeError):
        client.payments.list()


def test_retrieve_payment_encodes_id(config, payment_body):
    session = FakeSession(make_response(200, payment_body))
    client = PayArk(config, session=session)

    payment = client.payments.retrieve("pay/1 x")

    assert payment.status == "success"
    assert session.last["url"] == "https://api.payark.com/v1/payments/pay%2F1%20x"


def test_list_projects(config):
    body = [{"id": "proj_1", "name": "My Project", "api_key_secret": "sk_...", "created_at": "now"}]
    client = PayArk(config, session=FakeSession(make_response(200, body)))

    projects = client.projects.list()

    assert len(projects) == 1
    assert projects[0].name == "My Project"


@pytest.mark.parametrize(
    "call",
    [
        lambda c: c.checkout.create(
            CreateCheckoutParams(amount=1, provider="esewa", return_url="r")
        ),
        lambda c: c.payments.list(),
        lambda c: c.payments.retrieve("pay_1"),
        lambda c: c.projects.list(),
    ],
)
def test_rate_limit_on_every_operation(config, call):
    client = PayArk(config, session=FakeSession(make_response(429, {"error": "too many requests"})))

    with pytest.raises(PayArkError) as excinfo:
        call(client)

    assert excinfo.value.code is ErrorCode.RATE_LIMIT_ERROR
    assert excinfo.value.status_code == 429
    assert excinfo.value.message == "too many requests"


def test_resources_share_config_and_session(config):
    session = FakeSession()
    client = PayArk(config, session=session)

    assert client.checkout is client.checkout
    for resource in (client.checkout, client.payments, client.projects):
        assert resource.config is config
        assert resource.session is session
    assert session.calls == []


def test_close_leaves_injected_session_open(config):
    session = FakeSession()
    with PayArk(config, session=session):
        pass
    assert session.closed is False


def test_close_releases_owned_session(config, monkeypatch):
    created = []

    def factory():
        session = FakeSession()
        created.append(session)
        return session

    monkeypatch.setattr(requests, "Session", factory)

    with PayArk(config) as client:
        assert client.session is created[0]
        assert created[0].closed is False

    assert created[0].closed is True
