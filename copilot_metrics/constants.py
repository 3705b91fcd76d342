"""Constants and enumerations for Copilot metrics analysis."""

from enum import StrEnum
from typing import Final


# API Configuration
GITHUB_API_BASE_URL: Final[str] = "https://api.github.com"
API_METRICS_ENDPOINT: Final[str] = "/orgs/{org}/copilot/metrics"
GITHUB_ACCEPT_HEADER: Final[str] = "application/vnd.github.v3+json"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0
HTTP_OK: Final[int] = 200

# Configuration
DEFAULT_CONFIG_PATH: Final[str] = "config.properties"

# Default Values
UNKNOWN_LANGUAGE: Final[str] = "unknown"
DEFAULT_COUNT: Final[int] = 0
PERCENT: Final[float] = 100.0

# JSON Serialization
JSON_INDENT: Final[int] = 2

# Numeric Constants
EXIT_CODE_ERROR: Final[int] = 1


class ConfigKey(StrEnum):
    """Configuration keys, shared by the properties file and the environment."""

    GITHUB_TOKEN = "GITHUB_TOKEN"
    ORG_NAME = "ORG_NAME"


class PayloadKey(StrEnum):
    """Keys of the Copilot metrics API response."""

    IDE_CODE_COMPLETIONS = "copilot_ide_code_completions"
    EDITORS = "editors"
    MODELS = "models"
    LANGUAGES = "languages"
    NAME = "name"
    TOTAL_CODE_SUGGESTIONS = "total_code_suggestions"
    TOTAL_CODE_ACCEPTANCES = "total_code_acceptances"


class ApiQueryKey(StrEnum):
    """Query parameters accepted by the metrics endpoint."""

    SINCE = "since"
    UNTIL = "until"


class ReportColumn(StrEnum):
    """Column names used when exporting ranked entries."""

    LANGUAGE = "language"
    TOTAL_SUGGESTIONS = "total_suggestions"
    TOTAL_ACCEPTANCES = "total_acceptances"
    ACCEPTANCE_RATE = "acceptance_rate"


class LogMessage(StrEnum):
    """Log message templates."""

    FETCHING_METRICS = "Fetching Copilot metrics for organization {}..."
    FETCHED_METRICS = "Fetched {} bytes of metrics data"
    READING_INPUT = "Reading metrics payload from {}"
    SAVED_RAW = "Saved raw metrics payload to {}"
    DAILY_RECORDS = "Aggregating {} daily records"
    SKIPPED_BRANCH = "No {} found in {} #{}, skipping"
    SKIPPED_LANGUAGE = "Ignoring non-object language entry in model #{}"
    ACCEPTANCES_EXCEED = (
        "Language {} reports more acceptances ({}) than suggestions ({})"
    )
    CONSOLIDATED = "Consolidated metrics for {} languages"
    RANKED = "Ranked {} languages with suggestion activity"
    SAVED_JSON = "Saved {} ranked entries to {}"
    SAVED_CSV = "Saved {} ranked entries to {}"
    REPORT_HEADER = "Consolidated Copilot Acceptance Statistics by Language"
    EMPTY_REPORT = "No languages with code suggestions were found."
    ERROR_OCCURRED = "Error occurred: {}"


class CliHelp(StrEnum):
    """CLI help messages."""

    APP = "GitHub Copilot metrics analysis tool"
    ORG = "GitHub organization to report on. Overrides ORG_NAME from the config file."
    TOKEN = "GitHub token with access to Copilot metrics. Can also be set via GITHUB_TOKEN."
    CONFIG = "Properties or .env file holding GITHUB_TOKEN and ORG_NAME."
    INPUT_FILE = "Analyze a saved metrics payload instead of calling the API."
    SINCE = "Only include metrics on or after this ISO 8601 date."
    UNTIL = "Only include metrics up to this ISO 8601 date."
    TOP = "Only show the top N languages by acceptance rate."
    JSON_OUTPUT = "Also write the ranked report to this JSON file."
    CSV_OUTPUT = "Also write the ranked report to this CSV file."
    SAVE_RAW = "Write the fetched API payload to this file."
    PLAIN = "Print plain-text blocks instead of a table."
    VERBOSE = "Enable debug logging."
