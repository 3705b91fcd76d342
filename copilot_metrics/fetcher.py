"""Metrics fetcher for the GitHub Copilot API."""

from typing import Any

import httpx
from loguru import logger
from rich.progress import Progress, SpinnerColumn, TextColumn

from .config import MetricsConfig
from .constants import (
    API_METRICS_ENDPOINT,
    DEFAULT_TIMEOUT_SECONDS,
    GITHUB_ACCEPT_HEADER,
    GITHUB_API_BASE_URL,
    HTTP_OK,
    ApiQueryKey,
    LogMessage,
)


class MetricsFetchError(RuntimeError):
    """Raised when the metrics API answers with a non-200 status."""

    def __init__(self, *, url: str, status_code: int, body: str):
        super().__init__(
            f"Failed to fetch metrics using URL: {url}. "
            f"Status: {status_code}, Body: {body}"
        )
        self.url = url
        self.status_code = status_code
        self.body = body


class MetricsFetcher:
    """Handles fetching Copilot metrics for an organization.

    Attributes:
        config: Credentials and organization to query.
        base_url: Base URL for the GitHub API.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        config: MetricsConfig,
        base_url: str = GITHUB_API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the MetricsFetcher.

        Args:
            config: Credentials and organization to query.
            base_url: Base URL for the GitHub API.
            timeout: Request timeout in seconds.
            client: Optional pre-built client. The fetcher does not close it.
        """
        self.config = config
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    @property
    def url(self) -> str:
        return f"{self.base_url}{API_METRICS_ENDPOINT.format(org=self.config.org_name)}"

    def _build_headers(self) -> dict[str, str]:
        return {
            "Accept": GITHUB_ACCEPT_HEADER,
            "Authorization": f"Bearer {self.config.github_token}",
        }

    def _build_params(
        self, *, since: str | None, until: str | None
    ) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if since:
            params[ApiQueryKey.SINCE] = since
        if until:
            params[ApiQueryKey.UNTIL] = until
        return params

    async def fetch_metrics(
        self, *, since: str | None = None, until: str | None = None
    ) -> str:
        """Fetch the raw metrics payload for the configured organization.

        Args:
            since: Optional ISO 8601 lower bound for the reporting window.
            until: Optional ISO 8601 upper bound for the reporting window.

        Returns:
            str: The response body, a JSON array of daily records.

        Raises:
            MetricsFetchError: If the API does not answer with status 200.
        """
        logger.info(LogMessage.FETCHING_METRICS.format(self.config.org_name))

        with Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task("Fetching Copilot metrics from API...", total=None)

            if self._client is not None:
                response = await self._send(self._client, since=since, until=until)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await self._send(client, since=since, until=until)

        if response.status_code != HTTP_OK:
            raise MetricsFetchError(
                url=self.url, status_code=response.status_code, body=response.text
            )

        logger.success(LogMessage.FETCHED_METRICS.format(len(response.content)))
        return response.text

    async def _send(
        self,
        client: httpx.AsyncClient,
        *,
        since: str | None,
        until: str | None,
    ) -> httpx.Response:
        return await client.get(
            self.url,
            headers=self._build_headers(),
            params=self._build_params(since=since, until=until),
            timeout=self.timeout,
        )
