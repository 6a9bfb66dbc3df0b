# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from link_scout.config import FinderConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("concurrency: 5\ntimeout: 3", ".yaml", None),
        (json.dumps({"concurrency": 5, "timeout": 3}), ".json", None),
        (json.dumps({"concurrency": 0}), ".json", ValidationError),
        (json.dumps({"unknown": 1}), ".json", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- a\n- b", ".yaml", TypeError),
        ("concurrency = 5", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, FinderConfig)
        assert cfg.concurrency == 5
        assert cfg.timeout == 3.0


def test_defaults():
    cfg = FinderConfig()
    assert cfg.concurrency == 10
    assert cfg.timeout == 10.0
    assert cfg.scan_timeout is None
    assert cfg.output_format == "text"
    assert cfg.user_agent.startswith("LinkScout/")


def test_load_config_default_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_config(None) == FinderConfig()


def test_load_config_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("concurrency: 7\n", encoding="utf-8")
    assert load_config(None).concurrency == 7


def test_explicit_path_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_invalid_pattern_rejected():
    with pytest.raises(ValidationError):
        FinderConfig(pattern="(unclosed")


def test_empty_filter_is_none():
    assert FinderConfig(filter="").filter is None


def test_verbose_and_silent_conflict():
    with pytest.raises(ValidationError):
        FinderConfig(verbose=True, silent=True)


def test_config_is_frozen():
    cfg = FinderConfig()
    with pytest.raises(ValidationError):
        cfg.concurrency = 3
    assert cfg.model_copy(update={"concurrency": 3}).concurrency == 3


def test_fetch_deadline_defaults_to_timeout():
    assert FinderConfig(timeout=4).fetch_deadline == 4
    assert FinderConfig(timeout=4, scan_timeout=30).fetch_deadline == 30


def test_validation_error_propagates_from_file(tmp_path):
    cfg_path = write_file(tmp_path, "timeout: -1\n", ".yaml")
    with pytest.raises(ValidationError):
        load_config(cfg_path)
