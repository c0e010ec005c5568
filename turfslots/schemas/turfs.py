# turfslots/schemas/turfs.py
"""
Pydantic schemas for turf reference data as served by the turf API.
"""

from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# API payloads are camelCase; python code uses snake_case.
API_MODEL_CONFIG = ConfigDict(
    from_attributes=True,
    populate_by_name=True,
    alias_generator=to_camel,
)


class OperatingWindow(BaseModel):
    """Opening hours of a turf for one weekday (0 = Sunday)."""
    day_of_week: int = Field(ge=0, le=6)
    day_name: Optional[str] = None
    is_open: bool = True
    open_time: str = "00:00"
    close_time: str = "00:00"
    # close_time belongs to the next day
    overnight: bool = False

    model_config = API_MODEL_CONFIG


class BookingTypeCapacity(BaseModel):
    id: int
    name: str
    display_name: Optional[str] = None
    hourly_rate: Decimal = Field(
        validation_alias=AliasChoices("hourly_rate", "hourlyRate", "baseHourlyRate"),
    )
    max_concurrent: int = Field(default=1, ge=0)
    is_exclusive: bool = False
    min_players: Optional[int] = None
    max_players: Optional[int] = None

    model_config = API_MODEL_CONFIG

    @property
    def label(self) -> str:
        return self.display_name or self.name


class PricingShift(BaseModel):
    day_of_week: int = Field(ge=0, le=6)
    start_time: str
    end_time: str
    hourly_rate: Decimal
    shift_name: Optional[str] = None

    model_config = API_MODEL_CONFIG


class TurfDetails(BaseModel):
    id: str
    name: str = ""
    city: Optional[str] = None
    is_active: bool = True
    operating_hours: list[OperatingWindow] = Field(default_factory=list)
    booking_types: list[BookingTypeCapacity] = Field(default_factory=list)
    pricing_shifts: list[PricingShift] = Field(default_factory=list)

    model_config = API_MODEL_CONFIG
