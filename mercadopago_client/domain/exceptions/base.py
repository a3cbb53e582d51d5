"""Base client exception."""


class MercadoPagoException(Exception):
    """
    Base exception for all MercadoPago client errors.

    Carries a stable machine-readable ``code`` next to the
    human-readable message.
    """

    def __init__(self, message: str, code: str = "MERCADOPAGO_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
