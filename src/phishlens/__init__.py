"""phishlens — explainable highlighting for phishing and scam scans."""

from .analyzer import ThreatAnalyzer, AnalyzerConfig
from .patterns import Taxonomy, TaxonomyError, DEFAULT_TAXONOMY
from .resolver import SpanResolver
from .merge import merge_spans
from .highlight import segment, render_markup, highlight_markup
from .presentation import color_for, icon_for, presentation_for
from .urls import extract_urls, unique_urls, first_web_url
from .config import create_analyzer, load_config, load_from_yaml
from .types import Span, ReasonMatch, Segment, Presentation, HighlightResult

__all__ = [
    "ThreatAnalyzer", "AnalyzerConfig",
    "Taxonomy", "TaxonomyError", "DEFAULT_TAXONOMY",
    "SpanResolver",
    "merge_spans",
    "segment", "render_markup", "highlight_markup",
    "color_for", "icon_for", "presentation_for",
    "extract_urls", "unique_urls", "first_web_url",
    "create_analyzer", "load_config", "load_from_yaml",
    "Span", "ReasonMatch", "Segment", "Presentation", "HighlightResult",
]
__version__ = "0.1.0"
