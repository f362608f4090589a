"""Interval merging for highlight spans."""

from __future__ import annotations
from typing import Iterable

from .types import Span


def merge_spans(spans: Iterable[Span]) -> list[Span]:
    """Coalesce overlapping and touching spans into a sorted disjoint cover.

    A span starting exactly where the previous one ends is merged into it;
    only ``start > last.end`` opens a new span.  Zero-width spans cover
    nothing and are dropped.
    """
    merged: list[Span] = []
    for span in sorted(spans, key=lambda s: s.start):
        if span.end == span.start:
            continue
        if not merged or span.start > merged[-1].end:
            merged.append(span)
        elif span.end > merged[-1].end:
            merged[-1] = Span(merged[-1].start, span.end)
    return merged
