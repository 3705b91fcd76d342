"""Derived statistics for consolidated language metrics."""

from .constants import PERCENT
from .models import MetricSummary


def acceptance_rate(summary: MetricSummary) -> float:
    """Return accepted suggestions as a percentage of suggestions.

    A summary without suggestions has a rate of exactly 0.0.

    Args:
        summary: Consolidated totals for one language.

    Returns:
        float: Acceptance rate between 0 and 100 for consistent data.
    """
    if summary.total_suggestions == 0:
        return 0.0
    return summary.total_acceptances / summary.total_suggestions * PERCENT
