"""Typed records decoded from MercadoPago responses."""

from .balance import Balance, ReasonAmount, TransactionTypeAmount
from .movement import Movement, Movements, Paging
from .site import Site
from .token import Tokens
from .user import UserProfile

__all__ = [
    "Balance",
    "ReasonAmount",
    "TransactionTypeAmount",
    "Movement",
    "Movements",
    "Paging",
    "Site",
    "Tokens",
    "UserProfile",
]
