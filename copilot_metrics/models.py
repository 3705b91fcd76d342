"""Data models for Copilot metrics analysis."""

from dataclasses import asdict, dataclass
from typing import Any, NamedTuple

from .constants import UNKNOWN_LANGUAGE


class LanguageTuple(NamedTuple):
    """Counts read from a single language entry of the payload."""

    language: str
    suggestions: int
    acceptances: int


@dataclass(frozen=True)
class MetricSummary:
    """Consolidated completion totals for one language.

    Attributes:
        language: Language name as reported by the API (case sensitive).
        total_suggestions: Sum of all code suggestions observed for the language.
        total_acceptances: Sum of all accepted suggestions observed for the language.
    """

    language: str = UNKNOWN_LANGUAGE
    total_suggestions: int = 0
    total_acceptances: int = 0

    @classmethod
    def from_tuple(cls, *, values: LanguageTuple) -> "MetricSummary":
        """Create a summary holding a single observation.

        Args:
            values: Counts extracted from one language entry.

        Returns:
            MetricSummary: A new summary for the observed language.
        """
        return cls(
            language=values.language,
            total_suggestions=values.suggestions,
            total_acceptances=values.acceptances,
        )

    def merge(self, other: "MetricSummary") -> "MetricSummary":
        """Return a new summary with the elementwise sum of both totals.

        The language of ``self`` is kept; callers only merge summaries that
        share a language key.
        """
        return MetricSummary(
            language=self.language,
            total_suggestions=self.total_suggestions + other.total_suggestions,
            total_acceptances=self.total_acceptances + other.total_acceptances,
        )


@dataclass(frozen=True)
class RankedEntry:
    """A consolidated language summary paired with its acceptance rate.

    Attributes:
        language: Language name.
        total_suggestions: Total code suggestions for the language.
        total_acceptances: Total accepted suggestions for the language.
        acceptance_rate: Accepted suggestions as a percentage of suggestions.
    """

    language: str
    total_suggestions: int
    total_acceptances: int
    acceptance_rate: float

    def to_dict(self) -> dict[str, Any]:
        """Convert the entry to a dictionary for serialization.

        Returns:
            dict[str, Any]: Dictionary representation of the ranked entry.
        """
        return asdict(self)
