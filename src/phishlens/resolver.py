"""Reason-to-span resolution.

Two passes over the content:

  1. Reason pass — every pattern of every known reason, all matches.
  2. URL pass — a generic URL pattern, always run, so links get
     highlighted even when the classifier didn't flag them.

Offsets always point into the raw content; matching is case-insensitive
but nothing is normalized first.
"""

from __future__ import annotations
import logging
import re
from typing import Iterable

from .patterns import DEFAULT_TAXONOMY, SUSPICIOUS_URL, Taxonomy
from .types import ReasonMatch, Span
from .urls import URL_PATTERN

logger = logging.getLogger(__name__)


class SpanResolver:
    """Turns ``(content, reasons)`` into attributed matches and spans.

    Stateless apart from the injected taxonomy, safe to share.
    """

    __slots__ = ("taxonomy", "url_pattern")

    def __init__(
        self,
        taxonomy: Taxonomy | None = None,
        *,
        url_pattern: re.Pattern[str] = URL_PATTERN,
    ) -> None:
        self.taxonomy = taxonomy if taxonomy is not None else DEFAULT_TAXONOMY
        self.url_pattern = url_pattern

    def match_reasons(self, content: str, reasons: Iterable[str]) -> list[ReasonMatch]:
        """Hits for each reason the taxonomy knows; unknown labels are skipped."""
        matches: list[ReasonMatch] = []
        if not content:
            return matches
        for reason in reasons:
            patterns = self.taxonomy.patterns_for(reason)
            if not patterns:
                logger.debug("ignoring unknown reason %r", reason)
                continue
            for pattern in patterns:
                matches.extend(_scan(pattern, content, reason))
        return matches

    def match_urls(self, content: str) -> list[ReasonMatch]:
        """The always-on URL pass, attributed to the suspicious-URL reason."""
        if not content:
            return []
        return list(_scan(self.url_pattern, content, SUSPICIOUS_URL))

    def match(self, content: str, reasons: Iterable[str]) -> list[ReasonMatch]:
        matches = self.match_reasons(content, reasons)
        matches.extend(self.match_urls(content))
        logger.debug("resolved %d matches over %d chars", len(matches), len(content))
        return matches

    def resolve(self, content: str, reasons: Iterable[str]) -> list[Span]:
        """Unmerged spans for every reason hit plus every URL."""
        return [m.span for m in self.match(content, reasons)]


def _scan(pattern: re.Pattern[str], content: str, reason: str) -> Iterable[ReasonMatch]:
    for m in pattern.finditer(content):
        if m.end() == m.start():
            continue
        yield ReasonMatch(reason=reason, start=m.start(), end=m.end(), text=m.group())
