"""Account movements search result."""

from typing import Annotated, List

from pydantic import Field, JsonValue, StrictFloat, StrictInt, StrictStr

from .base import ProviderRecord
from .site import Site


class Paging(ProviderRecord):
    """Paging metadata of a search result page."""

    total: StrictInt = 0
    limit: StrictInt = 0
    offset: StrictInt = 0


class Movement(ProviderRecord):
    """A single money movement on the account."""

    amount: StrictFloat = 0.0
    balanced_amount: StrictFloat = 0.0
    client_id: StrictInt = 0
    currency_id: StrictStr = ""
    date_created: StrictStr = ""
    date_released: StrictStr = ""
    detail: StrictStr = ""
    financial_entity: StrictStr = ""
    id: StrictInt = 0
    label: List[JsonValue] = Field(default_factory=list)
    original_move_id: JsonValue = None
    reference_id: StrictInt = 0
    site_id: Annotated[Site | StrictStr, Field(union_mode="left_to_right")] = ""
    status: StrictStr = ""
    type: StrictStr = ""
    user_id: StrictInt = 0


class Movements(ProviderRecord):
    """First page of a movements search."""

    paging: Paging = Field(default_factory=Paging)
    results: List[Movement] = Field(default_factory=list)
