"""Shared base for records decoded from provider JSON."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class ProviderRecord(BaseModel):
    """
    Read-only mapping of a MercadoPago JSON object.

    Unknown keys are ignored and ``null`` values fall back to the
    field default, so absent and null fields both decode to the
    zero value of their type. A ``null`` object, at the top level
    or as a list element, decodes to an empty record. Scalar fields
    are strict: a number sent as a string is rejected, not converted.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def null_to_default(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
