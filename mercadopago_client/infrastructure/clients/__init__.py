"""External API client implementations."""

from .mercadopago_client import HttpMercadoPagoClient
from .transport import RestTransport

__all__ = [
    "HttpMercadoPagoClient",
    "RestTransport",
]
