"""Tests for the config loader and the CLI shell."""

import io
import json
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest
import yaml

from phishlens import TaxonomyError, Span
from phishlens.cli import main
from phishlens.config import ENV_VAR, create_analyzer, load_config, load_from_yaml
from phishlens.highlight import HIGHLIGHT_CLASS
from phishlens.patterns import REWARD_SCAM, URGENCY


SENSITIVE = "Requests for sensitive information"


# ── Config ───────────────────────────────────────────────────────────

def test_load_config_defaults():
    cfg = load_config({})
    assert cfg["highlight_class"] == HIGHLIGHT_CLASS
    assert cfg["skip_reasons"] == set()
    assert cfg["extra_reasons"] == {}


def test_load_config_nested_and_idempotent():
    cfg = load_config({"phishlens": {"skip_reasons": [REWARD_SCAM], "highlight_class": "hl"}})
    assert cfg["skip_reasons"] == {REWARD_SCAM}
    assert cfg["highlight_class"] == "hl"
    assert load_config(cfg) == cfg


def test_create_analyzer_extra_and_dropped_reasons():
    analyzer = create_analyzer({
        "extra_reasons": {SENSITIVE: ["password", "social security"]},
        "drop_reasons": [REWARD_SCAM],
    })
    taxonomy = analyzer.config.taxonomy
    assert SENSITIVE in taxonomy
    assert REWARD_SCAM not in taxonomy

    result = analyzer.analyze("Reply with your Password", [SENSITIVE])
    assert result.spans == [Span(16, 24)]


def test_create_analyzer_bad_pattern():
    with pytest.raises(TaxonomyError):
        create_analyzer({"extra_reasons": {"Broken": ["[a-"]}})


def test_load_config_rejects_wrong_shapes():
    with pytest.raises(TaxonomyError):
        load_config("just a string")
    with pytest.raises(TaxonomyError):
        load_config({"phishlens": ["not", "a", "mapping"]})
    with pytest.raises(TaxonomyError):
        load_config({"extra_reasons": ["password"]})
    with pytest.raises(TaxonomyError):
        load_config({"skip_reasons": [1, 2]})
    with pytest.raises(TaxonomyError):
        load_config({"highlight_class": 42})


def test_load_config_single_label_is_not_split():
    assert load_config({"skip_reasons": URGENCY})["skip_reasons"] == {URGENCY}


def test_create_analyzer_non_string_pattern():
    with pytest.raises(TaxonomyError):
        create_analyzer({"extra_reasons": {"Numbers": [123]}})
    with pytest.raises(TaxonomyError):
        create_analyzer({"extra_reasons": {"Numbers": 123}})


def test_load_from_yaml(tmp_path):
    path = tmp_path / "phishlens.yaml"
    path.write_text(yaml.safe_dump({"phishlens": {"skip_reasons": [URGENCY]}}))
    cfg = load_from_yaml(path)
    assert cfg["skip_reasons"] == {URGENCY}
    assert create_analyzer(cfg).analyze("URGENT", [URGENCY]).spans == []


# ── CLI ──────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch):
    monkeypatch.delenv(ENV_VAR, raising=False)


def test_cli_present(capsys):
    assert main(["present", "phishing"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"level": "phishing", "color": "danger", "icon": "warning"}


def test_cli_highlight_json(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("URGENT now"))
    assert main(["highlight", "--reason", URGENCY, "--level", "suspicious"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["spans"] == [{"start": 0, "end": 6}]
    assert out["color"] == "caution"
    assert out["reasons"] == [URGENCY]


def test_cli_highlight_markup(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("URGENT now"))
    assert main(["highlight", "--reason", URGENCY, "--markup"]) == 0
    assert capsys.readouterr().out == f'<span class="{HIGHLIGHT_CLASS}">URGENT</span> now\n'


def test_cli_extract_urls(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("http://a.io http://a.io www.b.com"))
    assert main(["extract-urls", "--unique"]) == 0
    assert json.loads(capsys.readouterr().out) == ["http://a.io", "www.b.com"]


def test_cli_reasons_with_config(tmp_path, capsys):
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.safe_dump({"extra_reasons": {SENSITIVE: ["password"]}}))
    assert main(["--config", str(path), "reasons"]) == 0
    reasons = json.loads(capsys.readouterr().out)
    assert reasons[-1] == SENSITIVE
    assert len(reasons) == 7


def test_cli_bad_config(tmp_path, capsys):
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.safe_dump({"extra_reasons": {"Broken": ["(oops"]}}))
    assert main(["--config", str(path), "reasons"]) == 1
    assert "phishlens:" in capsys.readouterr().err


@pytest.mark.parametrize("document", [
    {"extra_reasons": ["password"]},
    "plain scalar",
    {"extra_reasons": {"Numbers": [123]}},
])
def test_cli_malformed_config_exits_cleanly(tmp_path, capsys, document):
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.safe_dump(document))
    assert main(["--config", str(path), "reasons"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("phishlens:")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
