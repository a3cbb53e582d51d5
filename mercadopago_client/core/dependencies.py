"""Factories wiring the client from settings."""

from mercadopago_client.core.config import Settings, settings
from mercadopago_client.infrastructure.clients import HttpMercadoPagoClient


def build_client(config: Settings | None = None) -> HttpMercadoPagoClient:
    """Get an HttpMercadoPagoClient configured from settings."""
    config = config or settings
    return HttpMercadoPagoClient(
        client_id=config.client_id,
        client_secret=config.client_secret,
        sandbox=config.sandbox,
        base_url=config.base_url,
        timeout=config.timeout,
    )
