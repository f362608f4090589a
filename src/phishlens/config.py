"""YAML/dict config loader for phishlens.

Supports loading from a YAML file or a plain dict (for embedding in a
larger app config).

Example YAML:

    phishlens:
      highlight_class: "bg-warning-100 text-warning-600 px-1 rounded"
      skip_reasons:
        - Reward scam patterns detected
      extra_reasons:
        Requests for sensitive information:
          - password
          - social security
          - credit card
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Mapping

import yaml

from .analyzer import AnalyzerConfig, ThreatAnalyzer
from .highlight import HIGHLIGHT_CLASS
from .patterns import DEFAULT_TAXONOMY, TaxonomyError

ENV_VAR = "PHISHLENS_CONFIG"


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline).

    Raises TaxonomyError when a section has the wrong shape.
    """
    data = _mapping(data, "config")
    # Support nested under "phishlens" key or flat
    if "phishlens" in data:
        data = _mapping(data["phishlens"], "phishlens")

    highlight_class = data.get("highlight_class", HIGHLIGHT_CLASS)
    if not isinstance(highlight_class, str):
        raise TaxonomyError(f"highlight_class must be a string, got {highlight_class!r}")

    return {
        "highlight_class": highlight_class,
        "skip_reasons": _labels(data.get("skip_reasons"), "skip_reasons"),
        "drop_reasons": _labels(data.get("drop_reasons"), "drop_reasons"),
        "extra_reasons": dict(_mapping(data.get("extra_reasons"), "extra_reasons")),
    }


def _mapping(value: Any, name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TaxonomyError(f"{name} must be a mapping, got {type(value).__name__}")
    return value


def _labels(value: Any, name: str) -> set[str]:
    if value is None:
        return set()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple, set, frozenset)) or not all(isinstance(v, str) for v in value):
        raise TaxonomyError(f"{name} must be a list of reason labels")
    return set(value)


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    with open(path) as f:
        return load_config(yaml.safe_load(f))


def create_analyzer(config: dict[str, Any] | None = None) -> ThreatAnalyzer:
    """Create a fully configured analyzer from a config dict.

    Raises TaxonomyError for a malformed config or a bad or empty pattern list.
    """
    cfg = load_config(config)

    taxonomy = DEFAULT_TAXONOMY
    if cfg["drop_reasons"]:
        taxonomy = taxonomy.without(cfg["drop_reasons"])
    if cfg["extra_reasons"]:
        taxonomy = taxonomy.extend(cfg["extra_reasons"])

    return ThreatAnalyzer(AnalyzerConfig(
        taxonomy=taxonomy,
        highlight_class=cfg["highlight_class"],
        skip_reasons=cfg["skip_reasons"],
    ))
