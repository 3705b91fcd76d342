"""Storage for raw payloads and ranked reports."""

import json
from pathlib import Path

import polars as pl
from loguru import logger

from .constants import JSON_INDENT, LogMessage, ReportColumn
from .models import RankedEntry


class ReportStorage:
    """Handles saving metrics payloads and ranked reports to disk."""

    def save_raw(self, *, payload: str, filepath: Path | str) -> None:
        """Save the raw API payload as received.

        Args:
            payload: Response body from the metrics API.
            filepath: Path where the payload should be written.
        """
        filepath = Path(filepath)
        filepath.write_text(payload, encoding="utf-8")
        logger.success(LogMessage.SAVED_RAW.format(filepath))

    def save_json(self, *, entries: list[RankedEntry], filepath: Path | str) -> None:
        """Save ranked entries to a JSON file, preserving rank order.

        Args:
            entries: Entries in rank order.
            filepath: Path where the JSON file should be saved.
        """
        filepath = Path(filepath)

        with filepath.open("w") as f:
            json.dump([entry.to_dict() for entry in entries], f, indent=JSON_INDENT)

        logger.success(LogMessage.SAVED_JSON.format(len(entries), filepath))

    def save_csv(self, *, entries: list[RankedEntry], filepath: Path | str) -> None:
        """Save ranked entries to a CSV file using Polars.

        One row per language in rank order. An empty report still writes the
        header row.

        Args:
            entries: Entries in rank order.
            filepath: Path where the CSV file should be saved.
        """
        filepath = Path(filepath)

        df = pl.DataFrame(
            {
                str(ReportColumn.LANGUAGE): [e.language for e in entries],
                str(ReportColumn.TOTAL_SUGGESTIONS): [
                    e.total_suggestions for e in entries
                ],
                str(ReportColumn.TOTAL_ACCEPTANCES): [
                    e.total_acceptances for e in entries
                ],
                str(ReportColumn.ACCEPTANCE_RATE): [e.acceptance_rate for e in entries],
            },
            schema={
                str(ReportColumn.LANGUAGE): pl.Utf8,
                str(ReportColumn.TOTAL_SUGGESTIONS): pl.Int64,
                str(ReportColumn.TOTAL_ACCEPTANCES): pl.Int64,
                str(ReportColumn.ACCEPTANCE_RATE): pl.Float64,
            },
        )
        df.write_csv(filepath)

        logger.success(LogMessage.SAVED_CSV.format(len(df), filepath))
