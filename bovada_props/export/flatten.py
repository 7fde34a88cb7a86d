"""Flatten nested coupon responses into bet records."""

from __future__ import annotations

import math
from dataclasses import dataclass

import structlog

from bovada_props.api.schemas import CouponSchema, OutcomeSchema
from bovada_props.errors import OddsParseError
from bovada_props.export.models import BetOutcome, BetRecord

log = structlog.get_logger()


@dataclass
class FlattenStats:
    bets: int = 0
    skipped_placeholders: int = 0


def parse_decimal_odds(raw: str | None, *, event: str, market: str, outcome: str) -> float:
    if raw is None or not raw.strip():
        raise OddsParseError(event, market, outcome, raw)
    try:
        odds = float(raw)
    except ValueError as exc:
        raise OddsParseError(event, market, outcome, raw) from exc
    if not math.isfinite(odds) or odds < 1.0:
        raise OddsParseError(event, market, outcome, raw)
    return odds


def _build_outcome(outcome: OutcomeSchema, *, event: str, market: str) -> BetOutcome:
    price = outcome.price
    odds = parse_decimal_odds(
        price.decimal if price else None,
        event=event,
        market=market,
        outcome=outcome.description,
    )
    line = price.handicap if price and price.handicap else None
    return BetOutcome(desc=outcome.description, odds=odds, line=line)


def flatten_response(
    document: list[CouponSchema],
    skip_placeholders: bool = True,
    stats: FlattenStats | None = None,
) -> list[BetRecord]:
    """Walk events → display groups → markets → outcomes in document order.

    Display groups only contribute their markets. Markets with no outcomes
    are navigation placeholders and are dropped when skip_placeholders is set.
    """
    stats = stats if stats is not None else FlattenStats()
    bets: list[BetRecord] = []

    for coupon in document:
        for event in coupon.events:
            for group in event.display_groups:
                for market in group.markets:
                    if not market.outcomes and skip_placeholders:
                        stats.skipped_placeholders += 1
                        log.debug(
                            "placeholder_market_skipped",
                            event_name=event.description,
                            market=market.description,
                        )
                        continue

                    outcomes = tuple(
                        _build_outcome(o, event=event.description, market=market.description)
                        for o in market.outcomes
                    )
                    bets.append(
                        BetRecord(event=event.description, desc=market.description, outcomes=outcomes)
                    )

    stats.bets += len(bets)
    return bets


def flatten_responses(
    documents: list[list[CouponSchema]],
    skip_placeholders: bool = True,
    stats: FlattenStats | None = None,
) -> list[BetRecord]:
    """Flatten several responses, concatenated in list order."""
    bets: list[BetRecord] = []
    for document in documents:
        bets.extend(flatten_response(document, skip_placeholders, stats))
    return bets
