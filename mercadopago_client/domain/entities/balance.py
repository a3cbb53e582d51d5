"""Account balance record."""

from typing import List

from pydantic import Field, StrictFloat, StrictInt, StrictStr

from .base import ProviderRecord


class TransactionTypeAmount(ProviderRecord):
    """Available amount for one transaction type."""

    amount: StrictFloat = 0.0
    transaction_type: StrictStr = ""


class ReasonAmount(ProviderRecord):
    """Unavailable amount held for one reason."""

    amount: StrictFloat = 0.0
    reason: StrictStr = ""


class Balance(ProviderRecord):
    """Balance of a MercadoPago account, split by availability."""

    available_balance: StrictFloat = 0.0
    available_balance_by_transaction_type: List[TransactionTypeAmount] = Field(
        default_factory=list
    )
    currency_id: StrictStr = ""
    total_amount: StrictFloat = 0.0
    unavailable_balance: StrictFloat = 0.0
    unavailable_balance_by_reason: List[ReasonAmount] = Field(default_factory=list)
    user_id: StrictInt = 0
