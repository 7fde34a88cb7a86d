"""Render bet records as CSV and write them to disk."""

from __future__ import annotations

import asyncio
import csv
import io
import os
import tempfile
from pathlib import Path

import structlog

from bovada_props.errors import WriteError
from bovada_props.export.models import BetOutcome, BetRecord
from bovada_props.export.points import odds_to_points

log = structlog.get_logger()

HEADER_PREFIX = ["Event", "Bet"]
OUTCOME_HEADER = "Bet Side"


def _format_odds(odds: float) -> str:
    return f"{odds:.15g}"


def max_outcome_count(bets: list[BetRecord]) -> int:
    return max((len(b.outcomes) for b in bets), default=0)


def format_bet(bet: BetRecord) -> str:
    """Bet description, annotated with the first outcome's line if any."""
    line = bet.spread_or_total
    if line:
        return f"{bet.desc} $$number={line}"
    return bet.desc


def format_outcome(outcome: BetOutcome, include_points: bool = True) -> str:
    """Outcome cell: 'Chiefs $$line={-3.5} $$odds=1.91 $$points=48'."""
    parts = [outcome.desc]
    if outcome.line:
        parts.append(f"$$line={{{outcome.line}}}")
    parts.append(f"$$odds={_format_odds(outcome.odds)}")
    if include_points:
        parts.append(f"$$points={odds_to_points(outcome.odds)}")
    return " ".join(parts)


def build_rows(bets: list[BetRecord], include_points: bool = True) -> list[list[str]]:
    """Header plus one row per bet, every row padded to the same width."""
    width = max_outcome_count(bets)
    rows = [HEADER_PREFIX + [OUTCOME_HEADER] * width]
    for bet in bets:
        cells = [format_outcome(o, include_points) for o in bet.outcomes]
        cells.extend([""] * (width - len(cells)))
        rows.append([bet.event, format_bet(bet), *cells])
    return rows


def render_csv(bets: list[BetRecord], include_points: bool = True) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerows(build_rows(bets, include_points))
    return buf.getvalue()


def _write_atomic(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


async def write_csv(path: str | os.PathLike[str], text: str) -> Path:
    """Replace the file at path with text (UTF-8). Raises WriteError."""
    target = Path(path)
    try:
        await asyncio.to_thread(_write_atomic, target, text)
    except OSError as exc:
        raise WriteError(str(target), exc.strerror or str(exc)) from exc
    except UnicodeError as exc:
        raise WriteError(str(target), f"text is not encodable as UTF-8: {exc}") from exc
    log.info("csv_written", path=str(target), bytes=len(text.encode("utf-8")))
    return target
