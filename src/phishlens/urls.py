"""URL extraction from free text (SMS, email, social posts).

Three shapes are recognised: full ``http(s)://`` URLs, ``www.`` hosts, and
bare domain-like tokens such as ``paypal-verify.example.co/login``.  Labels
follow DNS rules (alphanumerics and hyphens, at most 63 characters).
"""

from __future__ import annotations
import re

_LABEL = r"[a-zA-Z0-9][-a-zA-Z0-9]{0,62}"

# Extraction pattern: bare domains need an alphabetic TLD of 2+ chars.
_EXTRACT = re.compile(
    r"https?://\S+"
    r"|www\.\S+"
    rf"|{_LABEL}(?:\.{_LABEL})+\.[a-zA-Z]{{2,}}(?:/\S*)?",
    re.IGNORECASE | re.ASCII,
)

# Always-on highlighting pattern: looser, any dotted host counts.
URL_PATTERN = re.compile(
    r"https?://\S+"
    r"|www\.\S+"
    rf"|{_LABEL}(?:\.{_LABEL})+",
    re.IGNORECASE | re.ASCII,
)


def extract_urls(text: str) -> list[str]:
    """Return every URL-like token in order of appearance.

    Duplicates are kept so results line up with positions in the text.
    """
    return [m.group() for m in _EXTRACT.finditer(text)]


def unique_urls(text: str) -> list[str]:
    """Extracted URLs with duplicates removed, first occurrence wins."""
    return list(dict.fromkeys(extract_urls(text)))


def first_web_url(text: str) -> str | None:
    """The first extracted URL if it carries an http(s) scheme.

    Used when pasted text should switch a form over to URL scanning.
    """
    urls = extract_urls(text)
    if urls and urls[0].lower().startswith("http"):
        return urls[0]
    return None
