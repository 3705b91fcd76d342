"""Tests for acceptance rates and ranking."""

import pytest

from copilot_metrics.aggregator import process
from copilot_metrics.models import MetricSummary, RankedEntry
from copilot_metrics.ranking import rank
from copilot_metrics.statistics import acceptance_rate
from payloads import daily_record, language


# ---------------------------------------------------------------------------
# Acceptance rate


def test_acceptance_rate_is_percentage() -> None:
    summary = MetricSummary("java", 1500, 427)
    assert acceptance_rate(summary) == pytest.approx(28.4667, abs=1e-4)


def test_acceptance_rate_without_suggestions_is_zero() -> None:
    assert acceptance_rate(MetricSummary("go", 0, 0)) == 0.0
    assert acceptance_rate(MetricSummary("go", 0, 5)) == 0.0


def test_acceptance_rate_passes_inconsistent_data_through() -> None:
    assert acceptance_rate(MetricSummary("ruby", 10, 15)) == pytest.approx(150.0)


# ---------------------------------------------------------------------------
# Ranking


def test_rank_orders_by_descending_rate() -> None:
    report = {
        "python": MetricSummary("python", 100, 50),
        "typescript": MetricSummary("typescript", 200, 120),
    }

    ranked = rank(report)

    assert [entry.language for entry in ranked] == ["typescript", "python"]
    assert ranked[0].acceptance_rate == pytest.approx(60.0)
    assert ranked[1].acceptance_rate == pytest.approx(50.0)


def test_rank_drops_languages_without_suggestions() -> None:
    report = {
        "go": MetricSummary("go", 0, 0),
        "lua": MetricSummary("lua", 0, 3),
        "c": MetricSummary("c", 10, 1),
    }

    assert [entry.language for entry in rank(report)] == ["c"]


def test_rank_drops_languages_with_negative_suggestions() -> None:
    doc = [daily_record([[language("cobol", -10, 3), language("go", 10, 5)]])]

    ranked = rank(process(doc))

    assert [entry.language for entry in ranked] == ["go"]


def test_rank_breaks_ties_by_language_name() -> None:
    report = {
        "rust": MetricSummary("rust", 10, 5),
        "c": MetricSummary("c", 20, 10),
        "go": MetricSummary("go", 4, 2),
        "zig": MetricSummary("zig", 10, 9),
    }

    assert [entry.language for entry in rank(report)] == ["zig", "c", "go", "rust"]


def test_rank_is_non_ascending(mixed_document) -> None:
    ranked = rank(process(mixed_document))

    rates = [entry.acceptance_rate for entry in ranked]
    assert rates == sorted(rates, reverse=True)
    assert [entry.language for entry in ranked] == ["typescript", "rust", "python"]


def test_rank_limit_keeps_top_entries(mixed_document) -> None:
    ranked = rank(process(mixed_document), limit=2)

    assert [entry.language for entry in ranked] == ["typescript", "rust"]


def test_rank_entries_carry_totals() -> None:
    ranked = rank({"java": MetricSummary("java", 1500, 427)})

    assert ranked == [
        RankedEntry(
            language="java",
            total_suggestions=1500,
            total_acceptances=427,
            acceptance_rate=pytest.approx(28.46666, abs=1e-4),
        )
    ]


def test_rank_empty_report() -> None:
    assert rank({}) == []
