"""Client exceptions."""

from .base import MercadoPagoException
from .api import (
    MercadoPagoDecodeException,
    MercadoPagoTransportException,
    MissingAccessTokenException,
)

__all__ = [
    "MercadoPagoException",
    "MercadoPagoDecodeException",
    "MercadoPagoTransportException",
    "MissingAccessTokenException",
]
