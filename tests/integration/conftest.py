"""
Fixtures for integration tests.

Provides:
- A fake MercadoPago provider served through httpx.MockTransport
- A client wired to the fake provider
- Literal provider payloads
"""

from typing import Any, Callable, Dict, List

import httpx
import pytest

from mercadopago_client.infrastructure.clients import HttpMercadoPagoClient


# =============================================================================
# Provider Payloads
# =============================================================================

TOKEN_PAYLOAD = {"access_token": "abc", "refresh_token": "def", "live_mode": True}

BALANCE_PAYLOAD = {
    "user_id": 123456,
    "total_amount": 1500.75,
    "available_balance": 1200.5,
    "unavailable_balance": 300.25,
    "currency_id": "ARS",
    "available_balance_by_transaction_type": [
        {"amount": 1000.0, "transaction_type": "payment"},
        {"amount": 200.5, "transaction_type": "transfer"},
    ],
    "unavailable_balance_by_reason": [
        {"amount": 300.25, "reason": "dispute"},
    ],
}

MOVEMENTS_PAYLOAD = {
    "paging": {"total": 42, "limit": 30, "offset": 0},
    "results": [
        {
            "id": 987,
            "amount": -25.5,
            "balanced_amount": 1474.5,
            "client_id": 55,
            "currency_id": "ARS",
            "date_created": "2015-06-10T12:00:00.000-04:00",
            "date_released": "2015-06-24T12:00:00.000-04:00",
            "detail": "payment",
            "financial_entity": "mercadopago",
            "label": ["internal", {"kind": "fee"}],
            "original_move_id": None,
            "reference_id": 1111,
            "site_id": "MLA",
            "status": "available",
            "type": "expense",
            "user_id": 123456,
        }
    ],
}

PROFILE_PAYLOAD = {
    "id": 123456,
    "nickname": "TESTUSER",
    "first_name": "Test",
    "last_name": "User",
    "email": "test_user@testuser.com",
    "site_id": "MLA",
    "country_id": "AR",
    "registration_date": "2015-03-10T10:25:41.000-04:00",
}

ERROR_PAYLOAD = {"message": "invalid_token", "error": "not_found", "cause": []}


# =============================================================================
# Fake Provider
# =============================================================================

class InterruptedStream(httpx.SyncByteStream):
    """Response body that drops the connection after the first chunk."""

    def __init__(self, head: bytes):
        self._head = head

    def __iter__(self):
        yield self._head
        raise httpx.ReadError("connection reset by peer")


class FakeProvider:
    """
    In-memory MercadoPago API.

    Routes are keyed by ``(method, path)`` and every received request
    is kept in ``requests`` for assertions.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[tuple, Callable[[httpx.Request], httpx.Response]] = {}

    def json(self, method: str, path: str, payload: Any, status_code: int = 200) -> None:
        self.routes[(method, path)] = lambda request: httpx.Response(
            status_code, json=payload
        )

    def raw(self, method: str, path: str, body: bytes, status_code: int = 200) -> None:
        self.routes[(method, path)] = lambda request: httpx.Response(
            status_code, content=body
        )

    def interrupt(self, method: str, path: str, head: bytes) -> None:
        self.routes[(method, path)] = lambda request: httpx.Response(
            200, stream=InterruptedStream(head)
        )

    def fail(self, method: str, path: str, exc_class=httpx.ConnectError) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc_class("connection refused", request=request)

        self.routes[(method, path)] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "resource not found"})
        return route(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_form(self) -> Dict[str, str]:
        body = self.last_request.content.decode()
        return dict(httpx.QueryParams(body))


@pytest.fixture
def provider() -> FakeProvider:
    fake = FakeProvider()
    fake.json("POST", "/oauth/token", TOKEN_PAYLOAD)
    fake.json("GET", "/users/123456/mercadopago_account/balance", BALANCE_PAYLOAD)
    fake.json("GET", "/mercadopago_account/movements/search", MOVEMENTS_PAYLOAD)
    fake.json("GET", "/users/me", PROFILE_PAYLOAD)
    return fake


@pytest.fixture
def client(provider: FakeProvider) -> HttpMercadoPagoClient:
    return HttpMercadoPagoClient(
        client_id="client-id",
        client_secret="client-secret",
        base_url="https://api.mercadopago.com",
        transport=httpx.MockTransport(provider.handle),
    )
