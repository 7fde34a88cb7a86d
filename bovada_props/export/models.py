"""Flat bet records produced from coupon responses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BetOutcome:
    desc: str
    odds: float  # decimal
    line: str | None = None  # handicap/threshold, verbatim from the feed


@dataclass(frozen=True)
class BetRecord:
    event: str
    desc: str
    outcomes: tuple[BetOutcome, ...] = field(default_factory=tuple)

    @property
    def spread_or_total(self) -> str | None:
        """Line of the first outcome, used to annotate the bet itself."""
        if self.outcomes:
            return self.outcomes[0].line
        return None


@dataclass
class ExportResult:
    output_path: str
    bet_count: int
    max_outcomes: int
    skipped_placeholders: int
