from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ConversionRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    amount: float = Field(gt=0)
    from_currency: str = Field(min_length=3, max_length=5)
    to_currency: str = Field(min_length=3, max_length=5)
    rate: float = Field(gt=0)
    result: float = Field(ge=0)

    @field_validator("from_currency", "to_currency", mode="before")
    @classmethod
    def upper_code(cls, v: str) -> str:
        return str(v or "").strip().upper()
