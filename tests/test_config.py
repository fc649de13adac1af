"""Unit tests for Config and related Pydantic models (whisk.config).

Tests cover:
- InputConfig / ThemeConfig / ScaffoldConfig defaults and validation
- Config defaults for the name and repository inputs
- save/load round trip, from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from whisk.config import Config, InputConfig, ScaffoldConfig, ThemeConfig


class TestInputConfig:
    @pytest.mark.unit
    def test_char_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            InputConfig(char_limit=0)

    @pytest.mark.unit
    def test_width_must_be_positive(self):
        with pytest.raises(ValidationError):
            InputConfig(width=0)


class TestThemeConfig:
    @pytest.mark.unit
    def test_title_style_combines_colours(self):
        theme = ThemeConfig()
        assert theme.title_style == "bold #FAFAFA on #7D56F4"

    @pytest.mark.unit
    def test_success_style(self):
        assert ThemeConfig(success_fg="green").success_style == "bold green"


class TestScaffoldConfig:
    @pytest.mark.unit
    def test_defaults(self):
        options = ScaffoldConfig()
        assert options.go_version == "1.21"
        assert options.dir_mode == 0o755
        assert options.file_mode == 0o644
        assert options.strict is False

    @pytest.mark.unit
    def test_empty_go_version_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(go_version="")

    @pytest.mark.unit
    def test_mode_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(file_mode=0o1777)


class TestConfig:
    @pytest.mark.unit
    def test_input_defaults(self):
        config = Config()
        assert config.name_input.placeholder == "my-awesome-project"
        assert config.name_input.char_limit == 50
        assert config.name_input.width == 30
        assert config.repo_input.placeholder == "github.com/username/my-awesome-project"
        assert config.repo_input.char_limit == 100
        assert config.repo_input.width == 40

    @pytest.mark.unit
    def test_output_dir_defaults_to_cwd(self):
        assert Config().output_dir == Path(".")

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        config = Config(output_dir=tmp_path / "out", scaffold=ScaffoldConfig(strict=True))
        saved = config.save(tmp_path / "nested" / "whisk.json")
        assert saved.exists()

        loaded = Config.load(saved)
        assert loaded.output_dir == tmp_path / "out"
        assert loaded.scaffold.strict is True
        assert loaded == config

    @pytest.mark.unit
    def test_load_invalid_json_raises(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text('{"scaffold": {"go_version": ""}}', encoding="utf-8")
        with pytest.raises(ValidationError):
            Config.load(path)

    @pytest.mark.unit
    def test_from_env(self, tmp_path: Path):
        env = {
            "WHISK_OUTPUT_DIR": str(tmp_path),
            "WHISK_GO_VERSION": "1.22",
            "WHISK_STRICT": "true",
        }
        with patch.dict(os.environ, env, clear=False):
            config = Config.from_env()
        assert config.output_dir == tmp_path
        assert config.scaffold.go_version == "1.22"
        assert config.scaffold.strict is True

    @pytest.mark.unit
    def test_from_env_defaults(self):
        cleared = {k: v for k, v in os.environ.items() if not k.startswith("WHISK_")}
        with patch.dict(os.environ, cleared, clear=True):
            config = Config.from_env()
        assert config.output_dir == Path(".")
        assert config.scaffold == ScaffoldConfig()

    @pytest.mark.unit
    def test_from_env_strict_false_values(self):
        with patch.dict(os.environ, {"WHISK_STRICT": "no"}):
            assert Config.from_env().scaffold.strict is False
