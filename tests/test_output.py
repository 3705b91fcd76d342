"""Tests for console rendering and report export."""

import csv
import json
from pathlib import Path

import pytest
from rich.console import Console

from copilot_metrics.models import RankedEntry
from copilot_metrics.printer import format_entry, print_report
from copilot_metrics.storage import ReportStorage

ENTRIES = [
    RankedEntry("typescript", 250, 130, 52.0),
    RankedEntry("java", 1500, 427, 427 / 1500 * 100),
]


def _capture(entries: list[RankedEntry] = ENTRIES, **kwargs) -> str:
    console = Console(record=True, width=120)
    print_report(entries, console=console, **kwargs)
    return console.export_text()


def test_format_entry_matches_plain_layout() -> None:
    text = format_entry(ENTRIES[1])

    assert "**java**" in text
    assert "Acceptance Rate: **28.47%**" in text
    assert "Total Suggestions: 1500, Total Acceptances: 427" in text
    assert text.endswith("---")


def test_print_report_table_lists_languages_in_order() -> None:
    output = _capture()

    assert "Consolidated Copilot Acceptance Statistics by Language" in output
    assert output.index("typescript") < output.index("java")
    assert "28.47%" in output
    assert "1,500" in output


def test_print_report_plain_mode() -> None:
    output = _capture(plain=True)

    assert "--- Consolidated Copilot Acceptance Statistics by Language ---" in output
    assert "Acceptance Rate: **52.00%**" in output


def test_print_report_empty() -> None:
    output = _capture(entries=[])

    assert "No languages with code suggestions were found." in output


# ---------------------------------------------------------------------------
# Export


def test_save_json_preserves_rank_order(tmp_path: Path) -> None:
    path = tmp_path / "report.json"

    ReportStorage().save_json(entries=ENTRIES, filepath=path)

    data = json.loads(path.read_text())
    assert [row["language"] for row in data] == ["typescript", "java"]
    assert data[1] == {
        "language": "java",
        "total_suggestions": 1500,
        "total_acceptances": 427,
        "acceptance_rate": pytest.approx(28.4667, abs=1e-4),
    }


def test_save_csv_writes_one_row_per_language(tmp_path: Path) -> None:
    path = tmp_path / "report.csv"

    ReportStorage().save_csv(entries=ENTRIES, filepath=path)

    with path.open() as f:
        rows = list(csv.DictReader(f))
    assert [row["language"] for row in rows] == ["typescript", "java"]
    assert rows[1]["total_suggestions"] == "1500"
    assert rows[1]["total_acceptances"] == "427"
    assert float(rows[1]["acceptance_rate"]) == pytest.approx(28.4667, abs=1e-4)


def test_save_csv_empty_report_writes_header(tmp_path: Path) -> None:
    path = tmp_path / "report.csv"

    ReportStorage().save_csv(entries=[], filepath=path)

    assert path.read_text().strip() == (
        "language,total_suggestions,total_acceptances,acceptance_rate"
    )


def test_save_raw_keeps_payload(tmp_path: Path, java_payload: str) -> None:
    path = tmp_path / "raw.json"

    ReportStorage().save_raw(payload=java_payload, filepath=path)

    assert path.read_text(encoding="utf-8") == java_payload
