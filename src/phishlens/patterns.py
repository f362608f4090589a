"""Pattern taxonomy — which phrases back each threat reason.

A reason is the human-readable label the classifier attaches to a scan
("Urgency language detected", ...).  The taxonomy maps each label to the
regexes whose matches get highlighted for it.  It is immutable; build a new
one with ``extend`` / ``without`` instead of editing in place.
"""

from __future__ import annotations
import re
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

URGENCY = "Urgency language detected"
REWARD_SCAM = "Reward scam patterns detected"
SECURITY_THREAT = "Security threat language detected"
LINK_INSTRUCTIONS = "Suspicious link instructions"
TIME_PRESSURE = "Artificial time pressure"
SUSPICIOUS_URL = "Suspicious URL detected"

# ASCII semantics: [a-z], \d and \s never match non-ASCII look-alikes
_FLAGS = re.IGNORECASE | re.ASCII


class TaxonomyError(ValueError):
    """Raised when a taxonomy definition cannot be compiled."""


class Taxonomy:
    """Immutable reason → patterns table."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Iterable[re.Pattern[str]]]) -> None:
        table: dict[str, tuple[re.Pattern[str], ...]] = {}
        for reason, patterns in entries.items():
            compiled = tuple(patterns)
            if not compiled:
                raise TaxonomyError(f"reason {reason!r} has no patterns")
            table[reason] = compiled
        self._entries = MappingProxyType(table)

    @classmethod
    def from_dict(cls, data: Mapping[str, Iterable[str]]) -> "Taxonomy":
        """Compile ``{reason: [regex, ...]}``, case-insensitive."""
        return cls({reason: _compile_all(reason, sources) for reason, sources in data.items()})

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def patterns_for(self, reason: str) -> tuple[re.Pattern[str], ...]:
        """Patterns for a reason; empty for labels the taxonomy doesn't know."""
        return self._entries.get(reason, ())

    @property
    def reasons(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, reason: object) -> bool:
        return reason in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Taxonomy({self.reasons!r})"

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def extend(self, data: Mapping[str, Iterable[str]]) -> "Taxonomy":
        """New taxonomy with extra reasons added (or existing ones replaced)."""
        merged: dict[str, Iterable[re.Pattern[str]]] = dict(self._entries)
        for reason, sources in data.items():
            merged[reason] = _compile_all(reason, sources)
        return Taxonomy(merged)

    def without(self, reasons: Iterable[str]) -> "Taxonomy":
        """New taxonomy with the given reasons dropped."""
        drop = set(reasons)
        return Taxonomy({r: p for r, p in self._entries.items() if r not in drop})


def _compile_all(reason: str, sources: Iterable[str]) -> list[re.Pattern[str]]:
    if not isinstance(reason, str):
        raise TaxonomyError(f"reason label must be a string, got {reason!r}")
    if isinstance(sources, str):
        sources = [sources]
    elif not isinstance(sources, (list, tuple, set, frozenset)):
        raise TaxonomyError(f"patterns for {reason!r} must be a list of strings")
    compiled: list[re.Pattern[str]] = []
    for source in sources:
        if not isinstance(source, str):
            raise TaxonomyError(f"pattern {source!r} for {reason!r} is not a string")
        try:
            compiled.append(re.compile(source, _FLAGS))
        except re.error as e:
            raise TaxonomyError(f"invalid pattern {source!r} for {reason!r}: {e}") from e
    if not compiled:
        raise TaxonomyError(f"reason {reason!r} has no patterns")
    return compiled


DEFAULT_TAXONOMY = Taxonomy.from_dict({
    URGENCY: [
        r"urgent",
        r"immediate",
        r"alert",
        r"attention",
        r"act now",
        r"action required",
        r"immediately",
    ],
    REWARD_SCAM: [
        r"won",
        r"winner",
        r"prize",
        r"gift card",
        r"reward",
        r"free",
        r"congratulations",
    ],
    SECURITY_THREAT: [
        r"suspended",
        r"compromised",
        r"verify",
        r"secure",
        r"unusual activity",
        r"suspicious",
    ],
    LINK_INSTRUCTIONS: [
        r"click here",
        r"tap here",
        r"click the link",
        r"tap this link",
    ],
    TIME_PRESSURE: [
        r"\d+\s*(?:hour|hr|minute|min|day|sec|second)s?",
        r"expires",
        r"limited time",
    ],
    SUSPICIOUS_URL: [
        r"https?://\S+",
        r"www\.\S+",
        r"bit\.ly/\S+",
        r"tinyurl\.com/\S+",
    ],
})
