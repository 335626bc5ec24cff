"""
Tests for CLI commands — resolve, catalogs, and global options.
"""

import json
import textwrap
from pathlib import Path

from click.testing import CliRunner

from pkgmatrix.main import cli

UBUNTU = ["resolve", "--distro", "ubuntu", "--arch", "amd64", "--os-version", "24.04"]


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "resolve OS package sets" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_bad_config(self, tmp_path: Path):
        config = tmp_path / "build.yml"
        config.write_text("board: rpi9\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), *UBUNTU])
        assert result.exit_code == 1
        assert "Invalid build configuration" in result.output


class TestResolveCommand:
    """Tests for the resolve command."""

    def test_lines(self):
        runner = CliRunner()
        result = runner.invoke(cli, UBUNTU)
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "file"
        assert "linux-image-generic-hwe-{{.version}}" in lines

    def test_expand_with_param(self):
        runner = CliRunner()
        result = runner.invoke(cli, [*UBUNTU, "--expand", "--param", "version=24.04"])
        assert result.exit_code == 0
        assert "linux-image-generic-hwe-24.04" in result.output.splitlines()

    def test_expand_with_derived_params(self):
        runner = CliRunner()
        result = runner.invoke(cli, [*UBUNTU, "--expand", "--derive-params"])
        assert result.exit_code == 0
        assert "linux-image-generic-hwe-24.04" in result.output.splitlines()

    def test_bad_param(self):
        runner = CliRunner()
        result = runner.invoke(cli, [*UBUNTU, "--param", "novalue"])
        assert result.exit_code == 2
        assert "key=value" in result.output

    def test_json(self):
        runner = CliRunner()
        result = runner.invoke(cli, [*UBUNTU, "--trusted-boot", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["trusted_boot"] is True
        assert data["system"]["family"] == "debian-family"
        assert "systemd-boot" in data["packages"]

    def test_machine_name_and_family_override(self):
        runner = CliRunner()
        result = runner.invoke(cli, [
            "resolve", "-d", "fedora", "-f", "redhat-family", "-a", "x86_64",
            "--os-version", "40", "--json",
        ])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["system"]["arch"] == "amd64"
        assert "grub2-efi-x64" in data["packages"]

    def test_build_config_sets_mode(self, tmp_path: Path):
        config = tmp_path / "build.yml"
        config.write_text(textwrap.dedent("""\
            build:
              trusted_boot: true
              expand_templates: true
              template_params:
                version: "24.04"
        """))
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), *UBUNTU])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "systemd-boot" in lines
        assert "grub-pc-bin" not in lines

    def test_flag_overrides_config(self, tmp_path: Path):
        config = tmp_path / "build.yml"
        config.write_text("trusted_boot: true\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), *UBUNTU, "--legacy"])
        assert result.exit_code == 0
        assert "grub-pc-bin" in result.output.splitlines()

    def test_board(self):
        runner = CliRunner()
        result = runner.invoke(cli, [
            "resolve", "-d", "arch", "-a", "arm64", "--os-version", "2024.01", "-b", "rpi4",
        ])
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "linux-rpi4"


class TestCatalogsCommand:
    def test_check(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["catalogs", "check"])
        assert result.exit_code == 0
        assert "All catalogs are valid" in result.output

    def test_check_json(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["catalogs", "check", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"valid": True, "errors": {}}

    def test_check_json_reports_errors(self, monkeypatch, catalog_set_factory):
        from pkgmatrix.core.services import package_catalog

        monkeypatch.setattr(package_catalog, "DEFAULT_CATALOGS", catalog_set_factory(common=("",)))
        runner = CliRunner()
        result = runner.invoke(cli, ["catalogs", "check", "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["valid"] is False
        assert list(data["errors"]) == ["common"]

    def test_show(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["catalogs", "show", "kernel", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["distros"]["ubuntu"]["any"]["24.10"] == ["linux-image-generic-hwe-24.04"]

    def test_show_common(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["catalogs", "show", "common"])
        assert result.exit_code == 0
        assert "parted" in result.output

    def test_show_unknown(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["catalogs", "show", "nope"])
        assert result.exit_code == 1
        assert "Unknown catalog" in result.output
