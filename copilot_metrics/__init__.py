"""GitHub Copilot metrics analysis package."""

from .aggregator import MalformedMetricsError, merge_reports, process, process_json
from .config import ConfigurationError, MetricsConfig
from .fetcher import MetricsFetcher, MetricsFetchError
from .models import LanguageTuple, MetricSummary, RankedEntry
from .pipeline import build_report, run_report
from .ranking import rank
from .statistics import acceptance_rate
from .storage import ReportStorage

__all__ = [
    "ConfigurationError",
    "LanguageTuple",
    "MalformedMetricsError",
    "MetricSummary",
    "MetricsConfig",
    "MetricsFetchError",
    "MetricsFetcher",
    "RankedEntry",
    "ReportStorage",
    "acceptance_rate",
    "build_report",
    "merge_reports",
    "process",
    "process_json",
    "rank",
    "run_report",
]
