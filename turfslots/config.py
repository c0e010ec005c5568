# turfslots/config.py
"""
Runtime settings and slot engine configuration.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[1]

# Advance/remaining split shared with backend pricing.
ADVANCE_RATIO = Decimal("0.5")


class Settings(BaseSettings):
    api_base_url: str = "http://localhost:8000/v1"
    api_timeout_seconds: float = 30.0
    redis_url: str = "redis://localhost:6379/0"

    slot_step_minutes: int = 60
    platform_fee: Decimal = Decimal("0")
    advance_ratio: Decimal = ADVANCE_RATIO
    cache_ttl_seconds: int = 300

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TURFSLOTS_",
        env_file=BASE_DIR / ".env",
        extra="ignore",
    )


@dataclass(frozen=True)
class SlotEngineConfig:
    """
    Configuration for the slot engine.

    Attributes:
        slot_step_minutes: Slot granularity in minutes (default hourly)
        platform_fee: Flat platform fee included in a booking's total fee
        advance_ratio: Share of the actual fee paid in advance
        currency_symbol: Prefix used in rate display strings
        cache_ttl_seconds: Redis TTL for cached availability views
    """
    slot_step_minutes: int = 60
    platform_fee: Decimal = Decimal("0")
    advance_ratio: Decimal = field(default=ADVANCE_RATIO)
    currency_symbol: str = "₹"
    cache_ttl_seconds: int = 300

    def __post_init__(self):
        """Validate configuration."""
        if not 0 < self.slot_step_minutes <= 24 * 60:
            raise ValueError(
                f"slot_step_minutes must be within 1..1440, got {self.slot_step_minutes}"
            )
        if not Decimal("0") <= Decimal(self.advance_ratio) <= Decimal("1"):
            raise ValueError(f"advance_ratio must be within 0..1, got {self.advance_ratio}")
        if Decimal(self.platform_fee) < 0:
            raise ValueError(f"platform_fee cannot be negative, got {self.platform_fee}")

    @property
    def slots_per_day(self) -> int:
        """Number of whole slots in a 24-hour day."""
        return (24 * 60) // self.slot_step_minutes


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_engine_config() -> SlotEngineConfig:
    """Get slot engine configuration (singleton), built from settings."""
    settings = get_settings()
    return SlotEngineConfig(
        slot_step_minutes=settings.slot_step_minutes,
        platform_fee=settings.platform_fee,
        advance_ratio=settings.advance_ratio,
        cache_ttl_seconds=settings.cache_ttl_seconds,
    )
