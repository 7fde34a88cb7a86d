"""Pydantic models for Bovada coupon responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class PriceSchema(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str | None = None
    decimal: str | None = None
    handicap: str | None = None


class OutcomeSchema(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str | None = None
    description: str
    status: str | None = None
    price: PriceSchema | None = None


class MarketSchema(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, populate_by_name=True)

    id: str | None = None
    description_key: str | None = Field(default=None, alias="descriptionKey")
    description: str
    outcomes: list[OutcomeSchema] = Field(default_factory=list)


class DisplayGroupSchema(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str | None = None
    description: str | None = None
    markets: list[MarketSchema] = Field(default_factory=list)


class EventSchema(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, populate_by_name=True)

    id: str | None = None
    description: str
    status: str | None = None
    start_time: int | None = Field(default=None, alias="startTime")
    display_groups: list[DisplayGroupSchema] = Field(default_factory=list, alias="displayGroups")


class CouponSchema(BaseModel):
    events: list[EventSchema] = Field(default_factory=list)


_response_adapter: TypeAdapter[list[CouponSchema]] = TypeAdapter(list[CouponSchema])


def parse_coupon_response(payload: object) -> list[CouponSchema]:
    """Validate a decoded JSON body. Raises pydantic.ValidationError."""
    return _response_adapter.validate_python(payload)
