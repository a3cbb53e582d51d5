"""User profile record returned by ``/users/me``."""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import Field, JsonValue, StrictBool, StrictFloat, StrictInt, StrictStr

from .base import ProviderRecord
from .site import Site


class Address(ProviderRecord):
    address: StrictStr = ""
    city: StrictStr = ""
    state: StrictStr = ""
    zip_code: StrictStr = ""


class Phone(ProviderRecord):
    area_code: StrictStr = ""
    extension: StrictStr = ""
    number: StrictStr = ""
    verified: StrictBool = False


class Identification(ProviderRecord):
    number: StrictStr = ""
    type: StrictStr = ""


class Credit(ProviderRecord):
    consumed: StrictFloat = 0.0
    credit_level_id: StrictStr = ""


class PaidTotal(ProviderRecord):
    paid: StrictInt = 0
    total: StrictInt = 0


class NotYetRated(PaidTotal):
    units: StrictInt = 0


class BuyerTransactions(ProviderRecord):
    """Buyer transaction counters over the reputation period."""

    canceled: PaidTotal = Field(default_factory=PaidTotal)
    completed: StrictInt = 0
    not_yet_rated: NotYetRated = Field(default_factory=NotYetRated)
    period: StrictStr = ""
    total: StrictInt = 0
    unrated: PaidTotal = Field(default_factory=PaidTotal)


class BuyerReputation(ProviderRecord):
    canceled_transactions: StrictInt = 0
    tags: List[JsonValue] = Field(default_factory=list)
    transactions: BuyerTransactions = Field(default_factory=BuyerTransactions)


class Ratings(ProviderRecord):
    negative: StrictFloat = 0.0
    neutral: StrictFloat = 0.0
    positive: StrictFloat = 0.0


class SellerTransactions(ProviderRecord):
    canceled: StrictInt = 0
    completed: StrictInt = 0
    period: StrictStr = ""
    ratings: Ratings = Field(default_factory=Ratings)
    total: StrictInt = 0


class SellerReputation(ProviderRecord):
    level_id: StrictStr = ""
    power_seller_status: JsonValue = None
    transactions: SellerTransactions = Field(default_factory=SellerTransactions)


class ImmediatePayment(ProviderRecord):
    reasons: List[JsonValue] = Field(default_factory=list)
    required: StrictBool = False


class Billing(ProviderRecord):
    allow: StrictBool = False
    codes: List[JsonValue] = Field(default_factory=list)


class Permission(Billing):
    """Whether the user may buy, list or sell, and on which conditions."""

    immediate_payment: ImmediatePayment = Field(default_factory=ImmediatePayment)


class UserStatus(ProviderRecord):
    billing: Billing = Field(default_factory=Billing)
    buy: Permission = Field(default_factory=Permission)
    confirmed_email: StrictBool = False
    immediate_payment: StrictBool = False
    list: Permission = Field(default_factory=Permission)
    mercadoenvios: StrictStr = ""
    mercadopago_account_type: StrictStr = ""
    mercadopago_tc_accepted: StrictBool = False
    required_action: StrictStr = ""
    sell: Permission = Field(default_factory=Permission)
    site_status: StrictStr = ""
    user_type: StrictStr = ""


class UserProfile(ProviderRecord):
    """
    Profile of the user owning the access token.

    Nested sub-objects are always present: when the provider omits
    them or sends ``null`` they decode to empty records. ``logo`` and
    ``power_seller_status`` are kept as the raw JSON value.
    """

    address: Address = Field(default_factory=Address)
    alternative_phone: Phone = Field(default_factory=Phone)
    buyer_reputation: BuyerReputation = Field(default_factory=BuyerReputation)
    country_id: StrictStr = ""
    credit: Credit = Field(default_factory=Credit)
    email: StrictStr = ""
    first_name: StrictStr = ""
    id: StrictInt = 0
    identification: Identification = Field(default_factory=Identification)
    last_name: StrictStr = ""
    logo: JsonValue = None
    nickname: StrictStr = ""
    permalink: StrictStr = ""
    phone: Phone = Field(default_factory=Phone)
    points: StrictInt = 0
    registration_date: Optional[datetime] = None
    seller_experience: StrictStr = ""
    seller_reputation: SellerReputation = Field(default_factory=SellerReputation)
    shipping_modes: List[StrictStr] = Field(default_factory=list)
    site_id: Annotated[Site | StrictStr, Field(union_mode="left_to_right")] = ""
    status: UserStatus = Field(default_factory=UserStatus)
    tags: List[StrictStr] = Field(default_factory=list)
    user_type: StrictStr = ""
