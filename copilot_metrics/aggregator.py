"""Consolidate Copilot completion metrics into per-language totals."""

import json
import math
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from loguru import logger

from .constants import DEFAULT_COUNT, UNKNOWN_LANGUAGE, LogMessage, PayloadKey
from .models import LanguageTuple, MetricSummary
from .navigator import resolve_array


class MalformedMetricsError(ValueError):
    """Raised when the metrics payload is not a top-level JSON array."""


def parse_metrics(text: str | bytes) -> list[Any]:
    """Decode a raw metrics payload.

    Args:
        text: JSON text as returned by the metrics API.

    Returns:
        list[Any]: The decoded array of daily records.

    Raises:
        MalformedMetricsError: If the text is not valid JSON or not an array.
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedMetricsError(
            f"Invalid API response: could not decode JSON ({e})"
        ) from e

    if not isinstance(document, list):
        raise MalformedMetricsError("Invalid API response: Expected JSON Array.")
    return document


def _as_count(value: Any) -> int:
    """Coerce a leaf value to an integer count, or DEFAULT_COUNT.

    Booleans count as 1/0, floats are truncated toward zero and numeric
    strings are parsed; objects, arrays, nulls and non-finite numbers fall
    back to the default.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else DEFAULT_COUNT
    if isinstance(value, str):
        text = value.strip()
        if "_" in text:
            return DEFAULT_COUNT
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return _as_count(float(text))
        except ValueError:
            return DEFAULT_COUNT
    return DEFAULT_COUNT


def _as_name(value: Any) -> str:
    """Render a leaf ``name`` as text, or "unknown" when missing or null."""
    if value is None:
        return UNKNOWN_LANGUAGE
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    # objects and arrays have no text value
    return ""


def extract_language(entry: Mapping[str, Any]) -> LanguageTuple:
    """Read the name and counts of one language entry, applying defaults.

    Missing or null ``name`` becomes ``"unknown"``; other scalars are
    rendered as text. Counts are coerced leniently (numeric strings parsed,
    floats truncated, booleans as 1/0) and default to 0.

    Args:
        entry: A single element of a model's ``languages`` array.

    Returns:
        LanguageTuple: The extracted values.
    """
    return LanguageTuple(
        language=_as_name(entry.get(PayloadKey.NAME)),
        suggestions=_as_count(entry.get(PayloadKey.TOTAL_CODE_SUGGESTIONS)),
        acceptances=_as_count(entry.get(PayloadKey.TOTAL_CODE_ACCEPTANCES)),
    )


def iter_language_tuples(document: list[Any]) -> Iterator[LanguageTuple]:
    """Walk daily records -> editors -> models -> languages.

    Branches without editors, models or languages are skipped without
    affecting their siblings.

    Args:
        document: Decoded array of daily records.

    Yields:
        LanguageTuple: One tuple per language entry found.
    """
    for day_index, daily_record in enumerate(document):
        editors = resolve_array(
            daily_record, PayloadKey.IDE_CODE_COMPLETIONS, PayloadKey.EDITORS
        )
        if editors is None:
            logger.debug(
                LogMessage.SKIPPED_BRANCH.format(
                    PayloadKey.EDITORS, "daily record", day_index
                )
            )
            continue

        for editor_index, editor in enumerate(editors):
            models = resolve_array(editor, PayloadKey.MODELS)
            if models is None:
                logger.debug(
                    LogMessage.SKIPPED_BRANCH.format(
                        PayloadKey.MODELS, "editor", editor_index
                    )
                )
                continue

            for model_index, model in enumerate(models):
                languages = resolve_array(model, PayloadKey.LANGUAGES)
                if languages is None:
                    logger.debug(
                        LogMessage.SKIPPED_BRANCH.format(
                            PayloadKey.LANGUAGES, "model", model_index
                        )
                    )
                    continue

                for language in languages:
                    if not isinstance(language, Mapping):
                        logger.debug(LogMessage.SKIPPED_LANGUAGE.format(model_index))
                        continue
                    yield extract_language(language)


def consolidate(tuples: Iterable[LanguageTuple]) -> dict[str, MetricSummary]:
    """Fold language tuples into a new mapping keyed by language name.

    Args:
        tuples: Extracted language observations, in any order.

    Returns:
        dict[str, MetricSummary]: Additive totals per language.
    """
    consolidated: dict[str, MetricSummary] = {}
    for values in tuples:
        observed = MetricSummary.from_tuple(values=values)
        existing = consolidated.get(values.language)
        consolidated[values.language] = (
            observed if existing is None else existing.merge(observed)
        )
    return consolidated


def merge_reports(
    *reports: Mapping[str, MetricSummary],
) -> dict[str, MetricSummary]:
    """Merge partial consolidated mappings into a new one.

    The result does not depend on the order of ``reports``, so a payload can
    be split, aggregated piecewise and recombined.

    Args:
        reports: Consolidated mappings to combine.

    Returns:
        dict[str, MetricSummary]: Combined totals per language.
    """
    merged: dict[str, MetricSummary] = {}
    for report in reports:
        for language, summary in report.items():
            existing = merged.get(language)
            merged[language] = summary if existing is None else existing.merge(summary)
    return merged


def process(document: Any) -> dict[str, MetricSummary]:
    """Consolidate a decoded metrics payload into per-language totals.

    Args:
        document: Decoded metrics payload; must be a list of daily records.

    Returns:
        dict[str, MetricSummary]: Totals keyed by language name.

    Raises:
        MalformedMetricsError: If the document is not a top-level array.
    """
    if not isinstance(document, list):
        raise MalformedMetricsError("Invalid API response: Expected JSON Array.")

    logger.debug(LogMessage.DAILY_RECORDS.format(len(document)))
    consolidated = consolidate(iter_language_tuples(document))

    for summary in consolidated.values():
        if summary.total_acceptances > summary.total_suggestions:
            logger.warning(
                LogMessage.ACCEPTANCES_EXCEED.format(
                    summary.language,
                    summary.total_acceptances,
                    summary.total_suggestions,
                )
            )

    logger.info(LogMessage.CONSOLIDATED.format(len(consolidated)))
    return consolidated


def process_json(text: str | bytes) -> dict[str, MetricSummary]:
    """Decode a raw payload and consolidate it.

    Args:
        text: JSON text as returned by the metrics API.

    Returns:
        dict[str, MetricSummary]: Totals keyed by language name.
    """
    return process(parse_metrics(text))
