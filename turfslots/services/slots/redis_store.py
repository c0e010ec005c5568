# turfslots/services/slots/redis_store.py
"""
Redis storage for computed availability views.

Key format: slots:view:{turf_id}:{date}:{period}
Value: AvailabilityView JSON, expiring after cache_ttl_seconds.
period is the lowercased filter name, or "all" when unfiltered.

Views are deterministic for a given input, so a cached view is only
stale when bookings or turf data changed; see invalidator.py.
Redis errors are logged and treated as a cache miss.
"""

import logging
from datetime import date

from pydantic import ValidationError
from redis import Redis, RedisError

from ...config import SlotEngineConfig, get_engine_config
from ...schemas.slots import AvailabilityView

logger = logging.getLogger(__name__)

ALL_PERIODS = "all"


class SlotsRedisStore:
    """Redis storage wrapper for AvailabilityView JSON."""

    KEY_PREFIX = "slots:view"

    def __init__(self, redis: Redis, config: SlotEngineConfig | None = None):
        self.redis = redis
        self.config = config or get_engine_config()

    def _key(self, turf_id: str, dt: date, period: str | None = None) -> str:
        period_key = period.strip().lower() if period else ALL_PERIODS
        return f"{self.KEY_PREFIX}:{turf_id}:{dt.isoformat()}:{period_key}"

    # ── Write ────────────────────────────────────────────────────────────

    def store_view(self, turf_id: str, view: AvailabilityView) -> None:
        key = self._key(turf_id, view.date, view.period)
        try:
            self.redis.set(key, view.model_dump_json(), ex=self.config.cache_ttl_seconds)
        except RedisError:
            logger.exception("Failed to cache availability view %s", key)

    # ── Read ─────────────────────────────────────────────────────────────

    def get_view(
        self,
        turf_id: str,
        dt: date,
        period: str | None = None,
    ) -> AvailabilityView | None:
        """
        Returns:
            Cached AvailabilityView, or None on cache miss.
        """
        key = self._key(turf_id, dt, period)
        try:
            raw = self.redis.get(key)
        except RedisError:
            logger.exception("Failed to read availability view %s", key)
            return None

        if raw is None:
            return None

        try:
            return AvailabilityView.model_validate_json(raw)
        except ValidationError:
            logger.warning("Dropping unreadable cached view %s", key)

        try:
            self.redis.delete(key)
        except RedisError:
            logger.exception("Failed to drop unreadable view %s", key)
        return None

    # ── Delete ───────────────────────────────────────────────────────────

    def delete_views(
        self,
        turf_id: str,
        dates: list[date] | None = None,
    ) -> int:
        """
        Delete cached views.

        Args:
            turf_id: Turf ID
            dates: Specific dates, or None to delete all for turf.

        Returns:
            Number of deleted keys.
        """
        if dates:
            patterns = [f"{self.KEY_PREFIX}:{turf_id}:{dt.isoformat()}:*" for dt in dates]
        else:
            patterns = [f"{self.KEY_PREFIX}:{turf_id}:*"]

        try:
            keys = [key for pattern in patterns for key in self.redis.scan_iter(match=pattern)]
            if not keys:
                return 0
            return self.redis.delete(*keys)
        except RedisError:
            logger.exception("Failed to invalidate views for turf %s", turf_id)
            return 0
