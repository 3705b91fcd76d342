"""CLI interface for Copilot metrics analysis."""

import asyncio
import sys
from pathlib import Path

import typer
from loguru import logger

from .config import MetricsConfig
from .constants import DEFAULT_CONFIG_PATH, EXIT_CODE_ERROR, CliHelp, LogMessage
from .pipeline import build_report, fetch_payload
from .printer import print_report
from .storage import ReportStorage

app = typer.Typer(help=CliHelp.APP)


def _configure_logging(*, verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


def _load_payload(
    *,
    input_file: Path | None,
    config_path: Path,
    org: str | None,
    token: str | None,
    since: str | None,
    until: str | None,
    save_raw: Path | None,
    storage: ReportStorage,
) -> str:
    """Read the payload from disk or fetch it from the API."""
    if input_file is not None:
        logger.info(LogMessage.READING_INPUT.format(input_file))
        return input_file.read_text(encoding="utf-8")

    config = MetricsConfig.load(path=config_path, org_name=org, github_token=token)
    payload = asyncio.run(fetch_payload(config, since=since, until=until))

    if save_raw is not None:
        storage.save_raw(payload=payload, filepath=save_raw)
    return payload


@app.command()
def report(
    org: str = typer.Option(None, "--org", "-o", help=CliHelp.ORG),
    token: str = typer.Option(
        None, "--token", envvar="GITHUB_TOKEN", help=CliHelp.TOKEN
    ),
    config_path: Path = typer.Option(
        DEFAULT_CONFIG_PATH, "--config", "-c", help=CliHelp.CONFIG
    ),
    input_file: Path = typer.Option(
        None,
        "--input-file",
        "-i",
        exists=True,
        dir_okay=False,
        readable=True,
        help=CliHelp.INPUT_FILE,
    ),
    since: str = typer.Option(None, "--since", help=CliHelp.SINCE),
    until: str = typer.Option(None, "--until", help=CliHelp.UNTIL),
    top: int = typer.Option(None, "--top", "-n", min=1, help=CliHelp.TOP),
    json_output: Path = typer.Option(None, "--json-output", help=CliHelp.JSON_OUTPUT),
    csv_output: Path = typer.Option(None, "--csv-output", help=CliHelp.CSV_OUTPUT),
    save_raw: Path = typer.Option(None, "--save-raw", help=CliHelp.SAVE_RAW),
    plain: bool = typer.Option(False, "--plain", help=CliHelp.PLAIN),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=CliHelp.VERBOSE),
) -> None:
    """Report Copilot code-completion acceptance rates by language.

    Fetches the organization's Copilot metrics (or reads a saved payload),
    consolidates completions across editors, models and days, and prints
    languages ranked by acceptance rate.
    """
    _configure_logging(verbose=verbose)
    if input_file is not None and save_raw is not None:
        raise typer.BadParameter(
            "--save-raw only applies to payloads fetched from the API",
            param_hint="--save-raw",
        )
    storage = ReportStorage()

    try:
        payload = _load_payload(
            input_file=input_file,
            config_path=config_path,
            org=org,
            token=token,
            since=since,
            until=until,
            save_raw=save_raw,
            storage=storage,
        )
        entries = build_report(payload, limit=top)
        print_report(entries, plain=plain)

        if json_output is not None:
            storage.save_json(entries=entries, filepath=json_output)
        if csv_output is not None:
            storage.save_csv(entries=entries, filepath=csv_output)
    except Exception as e:
        logger.exception(LogMessage.ERROR_OCCURRED.format(e))
        raise typer.Exit(code=EXIT_CODE_ERROR)
