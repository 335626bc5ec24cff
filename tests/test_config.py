"""
Tests for configuration loading — build.yml parsing and validation.
"""

import textwrap
from pathlib import Path

import pytest

from pkgmatrix.core.config.loader import (
    ConfigError,
    find_build_file,
    load_build_config,
    load_build_config_or_default,
)
from pkgmatrix.core.models.build import BuildConfig
from pkgmatrix.core.models.system import Board


@pytest.fixture
def flat_build_yml(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        trusted_boot: true
        board: rpi4
        log_level: debug
        expand_templates: true
        template_params:
          version: "24.04"
    """)
    path = tmp_path / "build.yml"
    path.write_text(content)
    return path


@pytest.fixture
def wrapped_build_yml(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        build:
          derive_template_params: true
    """)
    path = tmp_path / "build.yml"
    path.write_text(content)
    return path


class TestLoadBuildConfig:
    """Tests for load_build_config()."""

    def test_load_flat(self, flat_build_yml: Path):
        config = load_build_config(flat_build_yml)
        assert config.trusted_boot is True
        assert config.board is Board.RPI4
        assert config.log_level == "DEBUG"
        assert config.expand_templates is True
        assert config.template_params == {"version": "24.04"}

    def test_load_wrapped(self, wrapped_build_yml: Path):
        config = load_build_config(wrapped_build_yml)
        assert config.derive_template_params is True
        assert config.trusted_boot is False

    def test_empty_file_is_defaults(self, tmp_path: Path):
        path = tmp_path / "build.yml"
        path.write_text("")
        assert load_build_config(path) == BuildConfig()

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_build_config(tmp_path / "nonexistent.yml")

    def test_invalid_yaml_raises(self, tmp_path: Path):
        path = tmp_path / "build.yml"
        path.write_text(":: invalid: yaml: [")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_build_config(path)

    def test_non_mapping_raises(self, tmp_path: Path):
        path = tmp_path / "build.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_build_config(path)

    def test_non_mapping_build_key_raises(self, tmp_path: Path):
        path = tmp_path / "build.yml"
        path.write_text("build: yes-please\n")
        with pytest.raises(ConfigError, match="'build' to be a mapping"):
            load_build_config(path)

    def test_unknown_board_raises(self, tmp_path: Path):
        path = tmp_path / "build.yml"
        path.write_text("board: rpi9\n")
        with pytest.raises(ConfigError, match="Invalid build configuration"):
            load_build_config(path)

    def test_unknown_log_level_raises(self, tmp_path: Path):
        path = tmp_path / "build.yml"
        path.write_text("log_level: chatty\n")
        with pytest.raises(ConfigError, match="log_level"):
            load_build_config(path)


class TestFindBuildFile:
    def test_finds_in_parent(self, flat_build_yml: Path):
        nested = flat_build_yml.parent / "a" / "b"
        nested.mkdir(parents=True)
        assert find_build_file(nested) == flat_build_yml.resolve()

    def test_default_when_absent(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        if find_build_file() is None:
            assert load_build_config_or_default() == BuildConfig()

    def test_explicit_path(self, wrapped_build_yml: Path):
        config = load_build_config_or_default(wrapped_build_yml)
        assert config.derive_template_params is True
