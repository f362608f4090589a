"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open character range ``[start, end)`` into the analyzed text."""
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"span start must be non-negative, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"span end {self.end} precedes start {self.start}")

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class ReasonMatch:
    """A single pattern hit, attributed to the reason that owns the pattern."""
    reason: str            # e.g. "Urgency language detected"
    start: int
    end: int
    text: str

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)


@dataclass(frozen=True, slots=True)
class Segment:
    """A run of the original text, flagged when it falls inside a highlight."""
    text: str
    highlighted: bool = False


@dataclass(frozen=True, slots=True)
class Presentation:
    """UI tokens for a threat level."""
    color: str             # "danger" | "caution" | "success" | "primary"
    icon: str              # "warning" | "help_outline" | "check_circle" | "info"


@dataclass(slots=True)
class HighlightResult:
    """Everything the presentation layer needs to render one scan."""
    content: str
    matches: list[ReasonMatch] = field(default_factory=list)
    spans: list[Span] = field(default_factory=list)        # merged, sorted
    segments: list[Segment] = field(default_factory=list)
    urls: list[str] = field(default_factory=list)
    presentation: Presentation | None = None
    markup: str = ""                                       # rendered HTML

    @property
    def matched_reasons(self) -> list[str]:
        """Reasons with at least one hit, in first-hit order."""
        seen: dict[str, None] = {}
        for m in self.matches:
            seen.setdefault(m.reason, None)
        return list(seen)
