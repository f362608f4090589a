"""ThreatAnalyzer — the main API.  Resolve, merge, segment, present.

Usage:
    from phishlens import ThreatAnalyzer

    analyzer = ThreatAnalyzer()      # reusable, thread-safe after init

    result = analyzer.analyze(
        "URGENT: click here http://evil.example",
        ["Urgency language detected", "Suspicious link instructions"],
        threat_level="phishing",
    )
    result.spans                 # [Span(0, 6), Span(8, 18), Span(19, 38)]
    result.presentation          # Presentation(color="danger", icon="warning")
    result.markup                # ready-to-insert HTML

The verdict itself (threat level + reasons) comes from the classifier;
this module only turns it into something a UI can draw.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

from .highlight import HIGHLIGHT_CLASS, render_markup, segment
from .merge import merge_spans
from .patterns import DEFAULT_TAXONOMY, Taxonomy
from .presentation import presentation_for
from .resolver import SpanResolver
from .types import HighlightResult, ReasonMatch
from .urls import extract_urls

logger = logging.getLogger(__name__)


@dataclass
class AnalyzerConfig:
    """Configuration for the ThreatAnalyzer."""
    taxonomy: Taxonomy = DEFAULT_TAXONOMY
    highlight_class: str = HIGHLIGHT_CLASS
    # Reasons that are never highlighted (the always-on URL pass still runs)
    skip_reasons: set[str] = field(default_factory=set)
    # Extra detectors: callables returning attributed matches
    custom_scanners: list[Callable[[str], list[ReasonMatch]]] = field(default_factory=list)


class ThreatAnalyzer:
    """Builds display-ready highlight results from classifier output."""

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        self.config = config or AnalyzerConfig()
        self.resolver = SpanResolver(self.config.taxonomy)

    def analyze(
        self,
        content: str,
        reasons: Iterable[str],
        threat_level: str | None = None,
    ) -> HighlightResult:
        """Highlight ``content`` for the given reasons.

        Unknown reasons are ignored.  Never raises on str input.
        """
        wanted = [r for r in reasons if r not in self.config.skip_reasons]

        matches = self.resolver.match(content, wanted)
        for scanner in self.config.custom_scanners:
            matches.extend(m for m in scanner(content) if m.end > m.start)

        spans = merge_spans(m.span for m in matches)
        logger.debug("%d matches merged into %d spans", len(matches), len(spans))

        segments = segment(content, spans)
        return HighlightResult(
            content=content,
            matches=sorted(matches, key=lambda m: (m.start, m.end)),
            spans=spans,
            segments=segments,
            urls=extract_urls(content),
            presentation=presentation_for(threat_level),
            markup=render_markup(segments, css_class=self.config.highlight_class),
        )

    def analyze_url(
        self,
        url: str,
        threat_level: str | None = None,
        reasons: Iterable[str] = (),
    ) -> HighlightResult:
        """A URL scan: the URL itself is the content being highlighted."""
        return self.analyze(url.strip(), reasons, threat_level)

    def analyze_messages(
        self,
        messages: list[dict],
        *,
        content_key: str = "content",
    ) -> list[dict]:
        """Attach highlight data to stored scan records.

        Each record carries ``content``, ``threatLevel`` and
        ``threatDetails.reasons``.  Returns new dicts with a ``highlight``
        entry; does NOT mutate the originals.
        """
        out: list[dict] = []
        for msg in messages:
            content = msg.get(content_key)
            if not isinstance(content, str):
                out.append(msg)
                continue
            reasons = (msg.get("threatDetails") or {}).get("reasons") or []
            result = self.analyze(content, reasons, msg.get("threatLevel"))
            out.append({**msg, "highlight": to_dict(result)})
        return out


def to_dict(result: HighlightResult) -> dict:
    """JSON-friendly view of a result."""
    presentation = result.presentation
    return {
        "segments": [{"text": s.text, "highlighted": s.highlighted} for s in result.segments],
        "spans": [{"start": s.start, "end": s.end} for s in result.spans],
        "reasons": result.matched_reasons,
        "urls": result.urls,
        "color": presentation.color if presentation else None,
        "icon": presentation.icon if presentation else None,
        "markup": result.markup,
    }
