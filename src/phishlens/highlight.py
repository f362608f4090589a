"""Highlighter — splits content into plain and marked segments.

Usage:
    from phishlens.highlight import highlight_markup

    html = highlight_markup("URGENT: click here", ["Urgency language detected"])
    # '<span class="...">URGENT</span>: click here'
"""

from __future__ import annotations
from html import escape
from typing import Iterable

from .merge import merge_spans
from .resolver import SpanResolver
from .types import Segment, Span

HIGHLIGHT_CLASS = "bg-warning-100 text-warning-600 px-1 rounded"


def segment(content: str, spans: Iterable[Span]) -> list[Segment]:
    """Walk merged spans left to right, emitting gaps and highlights.

    ``"".join(s.text for s in result) == content`` always holds, and no
    segment is empty.
    """
    segments: list[Segment] = []
    cursor = 0
    for span in spans:
        if span.start > cursor:
            segments.append(Segment(content[cursor:span.start]))
        if span.end > span.start:
            segments.append(Segment(content[span.start:span.end], highlighted=True))
        cursor = max(cursor, span.end)
    if cursor < len(content):
        segments.append(Segment(content[cursor:]))
    return segments


def render_markup(segments: Iterable[Segment], *, css_class: str = HIGHLIGHT_CLASS) -> str:
    """HTML for a segment list.  Text is escaped; highlights get a <span>."""
    parts: list[str] = []
    for seg in segments:
        text = escape(seg.text, quote=False)
        if seg.highlighted:
            parts.append(f'<span class="{escape(css_class)}">{text}</span>')
        else:
            parts.append(text)
    return "".join(parts)


def highlight_markup(
    content: str,
    reasons: Iterable[str],
    *,
    resolver: SpanResolver | None = None,
    css_class: str = HIGHLIGHT_CLASS,
) -> str:
    """Resolve, merge, segment and render in one call."""
    resolver = resolver or SpanResolver()
    spans = merge_spans(resolver.resolve(content, reasons))
    return render_markup(segment(content, spans), css_class=css_class)
