"""Export pipeline: fetch, flatten, render, write."""

from __future__ import annotations

import asyncio

import structlog

from bovada_props.api.bovada_client import BovadaClient
from bovada_props.config import Settings
from bovada_props.errors import ExportTimeoutError
from bovada_props.export.csv_writer import max_outcome_count, render_csv, write_csv
from bovada_props.export.flatten import FlattenStats, flatten_responses
from bovada_props.export.models import ExportResult

log = structlog.get_logger()


class ExportPipeline:
    def __init__(self, settings: Settings, client: BovadaClient) -> None:
        self._settings = settings
        self._client = client

    async def run(self) -> ExportResult:
        """Run one export. The file is only written once every step succeeded."""
        settings = self._settings
        log.info(
            "export_start",
            endpoints=len(settings.endpoints),
            output=settings.output_path,
            skip_placeholders=settings.skip_placeholder_markets,
        )

        try:
            documents = await asyncio.wait_for(
                self._client.fetch_all(settings.endpoints),
                timeout=settings.overall_timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise ExportTimeoutError(settings.overall_timeout_seconds) from exc
        log.info("responses_fetched", documents=len(documents))

        stats = FlattenStats()
        bets = flatten_responses(documents, settings.skip_placeholder_markets, stats)
        log.info(
            "bets_flattened",
            bets=stats.bets,
            skipped_placeholders=stats.skipped_placeholders,
        )

        text = render_csv(bets, include_points=settings.include_points)
        path = await write_csv(settings.output_path, text)

        result = ExportResult(
            output_path=str(path),
            bet_count=len(bets),
            max_outcomes=max_outcome_count(bets),
            skipped_placeholders=stats.skipped_placeholders,
        )
        log.info(
            "export_complete",
            path=result.output_path,
            bets=result.bet_count,
            max_outcomes=result.max_outcomes,
        )
        return result
