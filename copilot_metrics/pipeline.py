"""Report pipeline: fetch, consolidate and rank Copilot metrics."""

from loguru import logger

from .aggregator import process_json
from .config import MetricsConfig
from .fetcher import MetricsFetcher
from .models import RankedEntry
from .ranking import rank


def build_report(payload: str | bytes, *, limit: int | None = None) -> list[RankedEntry]:
    """Turn a raw metrics payload into ranked per-language entries.

    Args:
        payload: JSON text as returned by the metrics API.
        limit: Keep only the top ``limit`` languages when given.

    Returns:
        list[RankedEntry]: Languages ordered by descending acceptance rate.

    Raises:
        MalformedMetricsError: If the payload is not a JSON array.
    """
    consolidated = process_json(payload)
    return rank(consolidated, limit=limit)


async def fetch_payload(
    config: MetricsConfig,
    *,
    fetcher: MetricsFetcher | None = None,
    since: str | None = None,
    until: str | None = None,
) -> str:
    """Fetch the raw metrics payload for the configured organization.

    Args:
        config: Credentials and organization.
        fetcher: Fetcher to use; one is built from ``config`` when omitted.
        since: Optional ISO 8601 lower bound for the reporting window.
        until: Optional ISO 8601 upper bound for the reporting window.

    Returns:
        str: The undecoded response body.
    """
    fetcher = fetcher or MetricsFetcher(config=config)
    return await fetcher.fetch_metrics(since=since, until=until)


async def run_report(
    config: MetricsConfig,
    *,
    fetcher: MetricsFetcher | None = None,
    since: str | None = None,
    until: str | None = None,
    limit: int | None = None,
) -> list[RankedEntry]:
    """Fetch metrics for the configured organization and rank them.

    This is the library entry point. The CLI calls ``fetch_payload`` and
    ``build_report`` separately so it can keep the raw payload on disk.

    Args:
        config: Credentials and organization.
        fetcher: Fetcher to use; one is built from ``config`` when omitted.
        since: Optional ISO 8601 lower bound for the reporting window.
        until: Optional ISO 8601 upper bound for the reporting window.
        limit: Keep only the top ``limit`` languages when given.

    Returns:
        list[RankedEntry]: Languages ordered by descending acceptance rate.
    """
    payload = await fetch_payload(config, fetcher=fetcher, since=since, until=until)
    entries = build_report(payload, limit=limit)
    logger.success(f"Built report for {config.org_name} with {len(entries)} languages")
    return entries
