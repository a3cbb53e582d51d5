"""HTTP implementation of MercadoPagoAPIClient."""

from typing import Optional, Type, TypeVar

import httpx
import structlog
from pydantic import ValidationError

from mercadopago_client.core.metrics import record_api_failure
from mercadopago_client.domain.entities import Balance, Movements, Tokens, UserProfile
from mercadopago_client.domain.entities.base import ProviderRecord
from mercadopago_client.domain.exceptions import (
    MercadoPagoDecodeException,
    MissingAccessTokenException,
)
from mercadopago_client.domain.interfaces import MercadoPagoAPIClient

from .transport import RestTransport

logger = structlog.get_logger(__name__)

RecordT = TypeVar("RecordT", bound=ProviderRecord)


class HttpMercadoPagoClient(MercadoPagoAPIClient):
    """
    HTTP client for the MercadoPago account API.

    One instance per credential pair. The token pair from the last
    exchange is kept in ``tokens`` and used when an authenticated
    call is made without an explicit token.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        sandbox: bool = True,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.sandbox = sandbox
        self._client_id = client_id
        self._client_secret = client_secret
        self._rest = RestTransport(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )
        self.tokens: Optional[Tokens] = None

    def access_token(self) -> Tokens:
        """Run the client-credentials exchange against ``/oauth/token``."""
        form = {
            "client_id": self._client_id,
            "client_secret": self._client_secret,
            "grant_type": "client_credentials",
        }
        response = self._rest.call("POST", "/oauth/token", form=form, name="oauth_token")
        tokens = self._decode(response, Tokens, "oauth_token")

        self.tokens = tokens
        logger.info("mercadopago_token_obtained", live_mode=tokens.live_mode)
        return tokens

    def balance(self, user_id: int, tokens: Optional[Tokens] = None) -> Balance:
        resource = f"/users/{user_id}/mercadopago_account/balance"
        response = self._rest.call(
            "GET",
            resource,
            query=self._token_params(tokens),
            name="balance",
        )
        return self._decode(response, Balance, "balance")

    def movements(self, tokens: Optional[Tokens] = None) -> Movements:
        """Only the first page is fetched; ``paging`` is passed through as-is."""
        response = self._rest.call(
            "GET",
            "/mercadopago_account/movements/search",
            query=self._token_params(tokens),
            name="movements",
        )
        return self._decode(response, Movements, "movements")

    def profile(self, tokens: Optional[Tokens] = None) -> UserProfile:
        response = self._rest.call(
            "GET",
            "/users/me",
            query=self._token_params(tokens),
            name="profile",
        )
        return self._decode(response, UserProfile, "profile")

    def _token_params(self, tokens: Optional[Tokens]) -> dict:
        """Build the query carrying the access token."""
        tokens = tokens or self.tokens
        if tokens is None:
            raise MissingAccessTokenException()
        return {"access_token": tokens.access_token}

    def _decode(
        self,
        response: httpx.Response,
        record: Type[RecordT],
        resource: str,
    ) -> RecordT:
        """Parse a JSON response body into ``record``."""
        try:
            payload = response.json()
        except ValueError as e:
            record_api_failure(resource, "decode")
            raise MercadoPagoDecodeException(
                message=f"Invalid JSON in {resource} response: {e}",
                resource=resource,
                status_code=response.status_code,
            ) from e

        try:
            return record.model_validate(payload)
        except ValidationError as e:
            record_api_failure(resource, "decode")
            raise MercadoPagoDecodeException(
                message=f"Unexpected {resource} response shape: {e.error_count()} errors",
                resource=resource,
                status_code=response.status_code,
            ) from e
