"""Threat level → UI color and icon tokens."""

from __future__ import annotations

from .types import Presentation

PHISHING = "phishing"
SUSPICIOUS = "suspicious"
SAFE = "safe"

_COLORS = {
    PHISHING: "danger",
    SUSPICIOUS: "caution",
    SAFE: "success",
}
_ICONS = {
    PHISHING: "warning",
    SUSPICIOUS: "help_outline",
    SAFE: "check_circle",
}

DEFAULT_COLOR = "primary"
DEFAULT_ICON = "info"


def color_for(level: str | None) -> str:
    return _COLORS.get(level, DEFAULT_COLOR)


def icon_for(level: str | None) -> str:
    return _ICONS.get(level, DEFAULT_ICON)


def presentation_for(level: str | None) -> Presentation:
    """Both tokens at once; unknown levels fall back to primary/info."""
    return Presentation(color=color_for(level), icon=icon_for(level))
