"""
turfslots/utils/api.py

HTTP client for the remote turf API.

Responses are wrapped as {"success": bool, "data": ...}; the client
unwraps `data` and validates it into schemas.
"""

import logging
from datetime import date
from typing import Optional

import httpx

from ..config import get_settings
from ..exceptions import TurfApiError
from ..schemas.bookings import BookingRecord, UnavailablePeriod
from ..schemas.turfs import TurfDetails

logger = logging.getLogger(__name__)


class TurfApiClient:
    """Async client for the turf API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api_timeout_seconds
        self.transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        headers: dict = None,
        **kwargs
    ) -> Optional[dict | list]:
        """Base request; returns the unwrapped `data` payload."""
        url = f"{self.base_url}{path}"
        _headers = {"Content-Type": "application/json"}
        if headers:
            _headers.update(headers)

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                resp = await client.request(method, url, headers=_headers, **kwargs)
            except httpx.HTTPError as e:
                logger.error(f"API request failed: {method} {path} -> {e}")
                raise TurfApiError(f"{method} {path} failed: {e}") from e

        if resp.status_code == 204:
            return None

        if resp.status_code >= 400:
            logger.error(f"API error: {method} {path} -> {resp.status_code}")
            raise TurfApiError(f"{method} {path} -> {resp.status_code}", resp.status_code)

        body = resp.json()
        if isinstance(body, dict) and "data" in body:
            if body.get("success") is False:
                message = body.get("message") or "request was not successful"
                raise TurfApiError(f"{method} {path}: {message}", resp.status_code)
            return body["data"]
        return body

    # ------------------------------------------------------------------
    # Turfs
    # ------------------------------------------------------------------

    async def get_turf(self, turf_id: str) -> TurfDetails:
        """GET /turfs/{id}"""
        data = await self._request("GET", f"/turfs/{turf_id}")
        if not data:
            raise TurfApiError(f"Turf {turf_id} not found", 404)
        return TurfDetails.model_validate(data)

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------

    async def get_turf_bookings(
        self,
        turf_id: str,
        date_from: date,
        date_to: Optional[date] = None,
    ) -> list[BookingRecord]:
        """GET /turfs/{id}/bookings?date_from=&date_to="""
        params = {"date_from": date_from.isoformat()}
        if date_to:
            params["date_to"] = date_to.isoformat()

        data = await self._request("GET", f"/turfs/{turf_id}/bookings", params=params)
        if isinstance(data, dict):
            data = data.get("bookings", [])
        return [BookingRecord.model_validate({"turfId": turf_id, **item}) for item in data or []]

    # ------------------------------------------------------------------
    # Availability
    # ------------------------------------------------------------------

    async def get_unavailable_periods(
        self,
        turf_id: str,
        target_date: date,
    ) -> list[UnavailablePeriod]:
        """GET /turfs/{id}/availability?date=: blackout and booked periods."""
        data = await self._request(
            "GET",
            f"/turfs/{turf_id}/availability",
            params={"date": target_date.isoformat()},
        )
        if not isinstance(data, dict):
            return []
        return [UnavailablePeriod.model_validate(item) for item in data.get("unavailablePeriods", [])]
