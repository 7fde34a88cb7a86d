"""Exception types raised by the export pipeline."""

from __future__ import annotations


class ExportError(Exception):
    """Base class for failures that abort an export run."""

    def context(self) -> dict[str, object]:
        """Structured fields for logging."""
        return {}


class FetchError(ExportError):
    """Network failure or non-success HTTP status for an endpoint."""

    def __init__(self, endpoint: str, status_code: int | None = None, reason: str = "") -> None:
        self.endpoint = endpoint
        self.status_code = status_code
        self.reason = reason
        detail = f"HTTP {status_code}" if status_code is not None else (reason or "request failed")
        super().__init__(f"fetch failed for {endpoint}: {detail}")

    def context(self) -> dict[str, object]:
        return {"endpoint": self.endpoint, "status": self.status_code, "reason": self.reason}


class ResponseParseError(ExportError):
    """Response body is not JSON or does not match the coupon shape."""

    def __init__(self, endpoint: str, reason: str) -> None:
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"unparseable response from {endpoint}: {reason}")

    def context(self) -> dict[str, object]:
        return {"endpoint": self.endpoint, "reason": self.reason}


class OddsParseError(ExportError):
    """An outcome's decimal odds are missing or not a positive number."""

    def __init__(self, event: str, market: str, outcome: str, raw: object) -> None:
        self.event = event
        self.market = market
        self.outcome = outcome
        self.raw = raw
        super().__init__(
            f"invalid decimal odds {raw!r} for {outcome!r} in {market!r} ({event})"
        )

    def context(self) -> dict[str, object]:
        return {
            "event_name": self.event,
            "market": self.market,
            "outcome": self.outcome,
            "raw": self.raw,
        }


class WriteError(ExportError):
    """The output file could not be created or written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"could not write {path}: {reason}")

    def context(self) -> dict[str, object]:
        return {"path": self.path, "reason": self.reason}


class ExportTimeoutError(ExportError):
    """The fetch phase exceeded the overall deadline."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"fetching did not finish within {timeout:g}s")

    def context(self) -> dict[str, object]:
        return {"timeout": self.timeout}
