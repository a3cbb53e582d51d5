"""Exceptions raised while talking to the MercadoPago API."""

from .base import MercadoPagoException


class MercadoPagoTransportException(MercadoPagoException):
    """Raised when a request cannot be sent or its response cannot be read."""

    def __init__(self, message: str, resource: str):
        super().__init__(
            message=message,
            code="MERCADOPAGO_TRANSPORT_ERROR",
        )
        self.resource = resource


class MercadoPagoDecodeException(MercadoPagoException):
    """Raised when a response body is not JSON or does not fit the record."""

    def __init__(self, message: str, resource: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="MERCADOPAGO_DECODE_ERROR",
        )
        self.resource = resource
        self.status_code = status_code


class MissingAccessTokenException(MercadoPagoException):
    """Raised when an authenticated call is made before any token exchange."""

    def __init__(self):
        super().__init__(
            message="No access token available, call access_token() first",
            code="MISSING_ACCESS_TOKEN",
        )
