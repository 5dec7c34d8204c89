# =====================================================================
# File: tests/test_config.py
# YAML configuration loading and discovery
# =====================================================================
from __future__ import annotations

import pytest

from tokargs_pkg.core.config import AppConfig, ParserConfig, load_config
from tokargs_pkg.core.errors import ConfigError
from tokargs_pkg.utils.constants import AFTER_DASH_STOP, AFTER_DASH_VALUES, CONFIG_ENV, CONFIG_FILENAME
from tokargs_pkg.utils.files import find_config


def write(tmp_path, text, name=CONFIG_FILENAME):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_defaults_without_file(self):
        cfg = load_config(None)
        assert cfg == AppConfig()
        assert cfg.parser.after_double_dash == AFTER_DASH_STOP

    def test_values(self, tmp_path):
        path = write(tmp_path, "greeting: Hi\ncount: 3\nshout: true\nafter_double_dash: values\n")
        cfg = load_config(path)
        assert cfg.greeting == "Hi"
        assert cfg.count == 3
        assert cfg.shout is True
        assert cfg.parser == ParserConfig(AFTER_DASH_VALUES)
        assert cfg.source == path

    def test_empty_file(self, tmp_path):
        cfg = load_config(write(tmp_path, ""))
        assert cfg.greeting == "Hello"

    @pytest.mark.parametrize("text, message", [
        ("greeting: [unclosed\n", "invalid YAML"),
        ("- a\n- b\n", "mapping"),
        ("colour: red\n", "unknown key"),
        ("count: many\n", "count must be int"),
        ("count: yes\n", "count must be int"),
        ("count: -1\n", "negative"),
        ("shout: 1\n", "shout must be bool"),
        ("after_double_dash: later\n", "after_double_dash must be one of"),
    ])
    def test_rejected(self, tmp_path, text, message):
        with pytest.raises(ConfigError, match=message):
            load_config(write(tmp_path, text))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="cannot read"):
            load_config(tmp_path / "absent.yml")


class TestFindConfig:
    def test_explicit(self, tmp_path):
        assert find_config(str(tmp_path / "x.yml")) == tmp_path / "x.yml"

    def test_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "env.yml"))
        assert find_config() == tmp_path / "env.yml"

    def test_walks_up_from_cwd(self, monkeypatch, tmp_path):
        monkeypatch.delenv(CONFIG_ENV, raising=False)
        path = write(tmp_path, "count: 2\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert find_config() == path.resolve()

    def test_none_found(self, monkeypatch, tmp_path):
        monkeypatch.delenv(CONFIG_ENV, raising=False)
        monkeypatch.chdir(tmp_path)
        assert find_config() is None
