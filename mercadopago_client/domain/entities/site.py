"""MercadoPago site identifiers."""

from enum import Enum


class Site(str, Enum):
    """Country site a MercadoPago account or movement belongs to."""

    ARGENTINA = "MLA"
    BRAZIL = "MLB"
    MEXICO = "MLM"
    VENEZUELA = "MLV"
    COLOMBIA = "MCO"
    CHILE = "MLC"
