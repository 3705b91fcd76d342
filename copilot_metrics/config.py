"""Configuration loading for Copilot metrics analysis."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values
from loguru import logger

from .constants import DEFAULT_CONFIG_PATH, ConfigKey


class ConfigurationError(ValueError):
    """Raised when required configuration values are missing."""


@dataclass(frozen=True)
class MetricsConfig:
    """Credentials and target organization for the metrics API.

    Attributes:
        github_token: Token used for the Authorization header.
        org_name: GitHub organization whose metrics are fetched.
    """

    github_token: str
    org_name: str

    @classmethod
    def load(
        cls,
        *,
        path: Path | str | None = DEFAULT_CONFIG_PATH,
        org_name: str | None = None,
        github_token: str | None = None,
    ) -> "MetricsConfig":
        """Resolve configuration from a file, the environment and overrides.

        Values are taken from the ``KEY=VALUE`` file at ``path`` (the file is
        optional), then from ``GITHUB_TOKEN`` and ``ORG_NAME`` in the
        environment, then from the explicit arguments. Later sources win.

        Args:
            path: Properties or .env file to read. Skipped if it does not exist.
            org_name: Explicit organization, e.g. from a CLI option.
            github_token: Explicit token, e.g. from a CLI option.

        Returns:
            MetricsConfig: The resolved configuration.

        Raises:
            ConfigurationError: If the token or organization is missing or blank.
        """
        values: dict[str, str | None] = {}

        if path is not None and Path(path).is_file():
            logger.debug(f"Loading configuration from {path}")
            values.update(dotenv_values(path))

        for key in ConfigKey:
            env_value = os.environ.get(key)
            if env_value and env_value.strip():
                values[key] = env_value

        if github_token:
            values[ConfigKey.GITHUB_TOKEN] = github_token
        if org_name:
            values[ConfigKey.ORG_NAME] = org_name

        missing = [
            key for key in ConfigKey if not (values.get(key) or "").strip()
        ]
        if missing:
            source = (
                f"{path} or the environment" if path is not None else "the environment"
            )
            raise ConfigurationError(
                f"Missing required configuration: {' or '.join(missing)} in {source}"
            )

        return cls(
            github_token=values[ConfigKey.GITHUB_TOKEN].strip(),
            org_name=values[ConfigKey.ORG_NAME].strip(),
        )
