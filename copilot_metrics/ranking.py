"""Rank consolidated language metrics by acceptance rate."""

from collections.abc import Mapping

from loguru import logger

from .constants import LogMessage
from .models import MetricSummary, RankedEntry
from .statistics import acceptance_rate


def rank(
    report: Mapping[str, MetricSummary], *, limit: int | None = None
) -> list[RankedEntry]:
    """Order languages by acceptance rate, highest first.

    Languages without a positive suggestion count are dropped. Equal rates
    are ordered by language name ascending.

    Args:
        report: Consolidated totals keyed by language name.
        limit: Keep only the first ``limit`` entries when given.

    Returns:
        list[RankedEntry]: Entries sorted by descending acceptance rate.
    """
    entries = [
        RankedEntry(
            language=summary.language,
            total_suggestions=summary.total_suggestions,
            total_acceptances=summary.total_acceptances,
            acceptance_rate=acceptance_rate(summary),
        )
        for summary in report.values()
        if summary.total_suggestions > 0
    ]
    entries.sort(key=lambda entry: (-entry.acceptance_rate, entry.language))

    if limit is not None:
        entries = entries[:limit]

    logger.debug(LogMessage.RANKED.format(len(entries)))
    return entries
