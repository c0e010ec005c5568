# turfslots/routers/slots.py
"""
Slots API endpoints.

GET  /days                          - Date picker strip (next 7 days)
GET  /turfs/{turf_id}/slots         - Slot grid for a date, optional period
POST /turfs/{turf_id}/slots/invalidate - Drop cached grids (admin)
POST /turfs/{turf_id}/bookings/changed  - Drop grids a booking change touches
"""

import logging
from datetime import date, timedelta

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from fastapi.concurrency import run_in_threadpool
from redis import Redis

from ..config import SlotEngineConfig, get_engine_config
from ..exceptions import SlotEngineError, TurfApiError
from ..redis_client import get_redis
from ..schemas.bookings import BookingRecord
from ..schemas.slots import AvailabilityView, BookingDay
from ..services.slots import (
    DEFAULT_DAY_PERIODS,
    SlotsRedisStore,
    build_turf_availability,
    find_period,
    invalidate_booking,
    invalidate_turf_cache,
    upcoming_days,
)
from ..utils.api import TurfApiClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["slots"])


def get_api_client() -> TurfApiClient:
    return TurfApiClient()


def api_http_error(e: TurfApiError) -> HTTPException:
    if e.status_code == 404:
        return HTTPException(status_code=404, detail="Turf not found")
    return HTTPException(status_code=502, detail="Turf API unavailable")


@router.get("/days", response_model=list[BookingDay])
def get_booking_days(count: int = Query(7, ge=1, le=31)):
    return upcoming_days(date.today(), count)


@router.get("/turfs/{turf_id}/slots", response_model=AvailabilityView)
async def get_turf_slots(
    turf_id: str,
    target_date: date = Query(..., alias="date"),
    period: str | None = None,
    api: TurfApiClient = Depends(get_api_client),
    redis: Redis = Depends(get_redis),
    config: SlotEngineConfig = Depends(get_engine_config),
):
    """Get the slot grid of a turf for a date, optionally for one day period."""
    if target_date < date.today():
        raise HTTPException(status_code=400, detail="Date cannot be in the past")

    matched = find_period(DEFAULT_DAY_PERIODS, period) if period else None
    period_name = matched.name if matched else None

    store = SlotsRedisStore(redis, config)
    # Sync redis client; keep it off the event loop.
    cached = await run_in_threadpool(store.get_view, turf_id, target_date, period_name)
    if cached is not None:
        return cached

    try:
        turf = await api.get_turf(turf_id)
        # Overnight bookings of the day before and overnight windows into
        # the next day both reach this date's grid.
        bookings = await api.get_turf_bookings(
            turf_id, target_date - timedelta(days=1), target_date + timedelta(days=1),
        )
        unavailable = await api.get_unavailable_periods(turf_id, target_date)
    except TurfApiError as e:
        raise api_http_error(e) from e

    try:
        view = build_turf_availability(
            turf,
            target_date,
            bookings,
            matched,
            unavailable_periods=unavailable,
            config=config,
        )
    except SlotEngineError as e:
        logger.warning("Cannot build slots for turf %s on %s: %s", turf_id, target_date, e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    await run_in_threadpool(store.store_view, turf_id, view)
    return view


@router.post("/turfs/{turf_id}/slots/invalidate")
def invalidate_slots_cache(
    turf_id: str,
    dates: list[date] | None = Body(default=None),
    redis: Redis = Depends(get_redis),
):
    """Manually invalidate cached slot grids for a turf (admin endpoint)."""
    deleted = invalidate_turf_cache(redis, turf_id, dates)

    return {
        "turf_id": turf_id,
        "deleted_keys": deleted,
        "dates": [d.isoformat() for d in dates] if dates else "all",
    }


@router.post("/turfs/{turf_id}/bookings/changed")
def booking_changed(
    turf_id: str,
    booking: BookingRecord,
    redis: Redis = Depends(get_redis),
):
    """Drop cached grids a created, cancelled or moved booking can affect."""
    booking = booking.model_copy(update={"turf_id": turf_id})
    deleted = invalidate_booking(redis, booking)

    return {"turf_id": turf_id, "deleted_keys": deleted}
