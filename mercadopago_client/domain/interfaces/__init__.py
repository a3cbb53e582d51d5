"""
Domain Interfaces (Ports)
"""

from .clients import MercadoPagoAPIClient

__all__ = [
    "MercadoPagoAPIClient",
]
