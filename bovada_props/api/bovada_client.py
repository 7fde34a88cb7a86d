"""Async client for Bovada coupon endpoints."""

from __future__ import annotations

import asyncio

import httpx
import structlog
from pydantic import ValidationError

from bovada_props.api.schemas import CouponSchema, parse_coupon_response
from bovada_props.config import Settings
from bovada_props.errors import ExportError, FetchError, ResponseParseError

log = structlog.get_logger()


class BovadaClient:
    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._client = httpx.AsyncClient(
            timeout=settings.request_timeout_seconds,
            follow_redirects=True,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> BovadaClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ── Public methods ──────────────────────────────────────────────

    async def fetch_coupon(self, endpoint: str) -> list[CouponSchema]:
        """Fetch one endpoint and validate it as a coupon response."""
        try:
            resp = await self._client.get(endpoint)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(endpoint, exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            raise FetchError(endpoint, reason=f"{type(exc).__name__}: {exc}") from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise ResponseParseError(endpoint, f"invalid JSON: {exc}") from exc

        try:
            coupons = parse_coupon_response(payload)
        except ValidationError as exc:
            raise ResponseParseError(
                endpoint, f"unexpected shape ({exc.error_count()} errors)"
            ) from exc

        log.info(
            "coupon_fetched",
            endpoint=endpoint,
            events=sum(len(c.events) for c in coupons),
        )
        return coupons

    async def fetch_all(self, endpoints: list[str]) -> list[list[CouponSchema]]:
        """Fetch every endpoint concurrently. Results follow input order.

        All requests run to completion; failures are logged per endpoint and
        the first one in endpoint order is raised.
        """
        if not endpoints:
            raise ValueError("at least one endpoint is required")

        results = await asyncio.gather(
            *(self.fetch_coupon(endpoint) for endpoint in endpoints),
            return_exceptions=True,
        )

        failures: list[BaseException] = []
        for endpoint, result in zip(endpoints, results):
            if isinstance(result, ExportError):
                log.error("endpoint_failed", endpoint=endpoint, error=str(result))
                failures.append(result)
            elif isinstance(result, BaseException):
                failures.append(result)
        if failures:
            raise failures[0]

        return [r for r in results if not isinstance(r, BaseException)]
