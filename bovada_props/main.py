"""Entry point for the Bovada props export."""

from __future__ import annotations

import asyncio
import logging
import sys

import structlog

from bovada_props.api.bovada_client import BovadaClient
from bovada_props.config import Settings
from bovada_props.errors import ExportError
from bovada_props.export.models import ExportResult
from bovada_props.export.pipeline import ExportPipeline


def configure_logging(level: str) -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if sys.stderr.isatty() else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


async def export(settings: Settings) -> ExportResult:
    async with BovadaClient(settings) as client:
        return await ExportPipeline(settings, client).run()


def run_export(settings: Settings) -> int:
    """Run one export and map failures to an exit code."""
    log = structlog.get_logger()
    try:
        result = asyncio.run(export(settings))
    except ExportError as exc:
        log.error("export_failed", error_type=type(exc).__name__, error=str(exc), **exc.context())
        return 1
    print(f"Wrote {result.bet_count} bets to {result.output_path}")
    return 0


def main() -> None:
    settings = Settings()
    configure_logging(settings.log_level)
    sys.exit(run_export(settings))


if __name__ == "__main__":
    main()
