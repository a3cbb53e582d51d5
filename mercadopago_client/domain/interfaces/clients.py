"""External client interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from mercadopago_client.domain.entities import Balance, Movements, Tokens, UserProfile


class MercadoPagoAPIClient(ABC):
    """
    Abstract client for the MercadoPago account API.

    Authenticated calls take the token pair explicitly.
    """

    @abstractmethod
    def access_token(self) -> Tokens:
        """
        Exchange the configured client credentials for a token pair.

        Raises:
            MercadoPagoTransportException: If the request cannot be completed
            MercadoPagoDecodeException: If the response is not a token document
        """
        ...

    @abstractmethod
    def balance(self, user_id: int, tokens: Optional[Tokens] = None) -> Balance:
        """Fetch the account balance of ``user_id``."""
        ...

    @abstractmethod
    def movements(self, tokens: Optional[Tokens] = None) -> Movements:
        """Fetch the first page of account movements."""
        ...

    @abstractmethod
    def profile(self, tokens: Optional[Tokens] = None) -> UserProfile:
        """Fetch the profile of the user owning the token."""
        ...
