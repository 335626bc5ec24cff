"""
Tests for package-name template expansion.
"""

import pytest

from pkgmatrix.core.models.system import System
from pkgmatrix.core.services.package_catalog.domain.errors import (
    TemplateExecutionError,
    TemplateSyntaxError,
)
from pkgmatrix.core.services.package_catalog.domain.name_template import (
    derive_template_params,
    expand_package_list,
    expand_package_name,
    placeholders,
)


class TestExpandPackageName:
    """Tests for expand_package_name()."""

    def test_hwe_kernel(self):
        result = expand_package_name("linux-image-generic-hwe-{{.version}}", {"version": "24.04"})
        assert result == "linux-image-generic-hwe-24.04"

    def test_plain_name_unchanged(self):
        assert expand_package_name("curl", {}) == "curl"

    def test_glob_name_unchanged(self):
        assert expand_package_name("tpm2*", {}) == "tpm2*"

    def test_whitespace_inside_braces(self):
        assert expand_package_name("pkg-{{ .arch }}", {"arch": "arm64"}) == "pkg-arm64"

    def test_multiple_placeholders(self):
        result = expand_package_name("{{.a}}-{{.b}}", {"a": "x", "b": "y"})
        assert result == "x-y"

    def test_missing_key_raises(self):
        with pytest.raises(TemplateExecutionError) as exc_info:
            expand_package_name("linux-image-generic-hwe-{{.version}}", {})
        assert exc_info.value.key == "version"
        assert exc_info.value.entry == "linux-image-generic-hwe-{{.version}}"

    def test_empty_value_is_allowed(self):
        # Only a missing key is an error
        assert expand_package_name("pkg{{.suffix}}", {"suffix": ""}) == "pkg"

    @pytest.mark.parametrize(
        "bad",
        [
            "pkg-{{.version",
            "pkg-.version}}",
            "pkg-{{version}}",
            "pkg-{{.}}",
            "pkg-{{.ver sion}}",
            "pkg-{{.1version}}",
        ],
    )
    def test_syntax_errors(self, bad: str):
        with pytest.raises(TemplateSyntaxError):
            expand_package_name(bad, {"version": "1"})

    def test_stray_close_is_not_literal(self):
        with pytest.raises(TemplateSyntaxError, match="Unexpected"):
            expand_package_name("pkg-{{.version}}}}", {"version": "1"})


class TestPlaceholders:
    def test_lists_keys_in_order(self):
        assert placeholders("{{.b}}-{{.a}}") == ["b", "a"]

    def test_none(self):
        assert placeholders("vim") == []


class TestExpandPackageList:
    """Tests for expand_package_list() — collect-all behaviour."""

    def test_all_ok(self):
        result = expand_package_list(["a", "b-{{.v}}"], {"v": "1"})
        assert result.ok
        assert result.packages == ["a", "b-1"]

    def test_collects_every_failure(self):
        result = expand_package_list(
            ["a", "b-{{.missing}}", "c", "d-{{.bad", "e-{{.v}}"],
            {"v": "2"},
        )
        assert result.packages == ["a", "c", "e-2"]
        assert [type(e) for e in result.errors] == [TemplateExecutionError, TemplateSyntaxError]
        assert [e.entry for e in result.errors] == ["b-{{.missing}}", "d-{{.bad"]
        assert not result.ok

    def test_deterministic(self):
        entries = ["x-{{.k}}", "y", "z-{{.nope}}"]
        first = expand_package_list(entries, {"k": "1"})
        second = expand_package_list(entries, {"k": "1"})
        assert first.packages == second.packages
        assert [str(e) for e in first.errors] == [str(e) for e in second.errors]


class TestDeriveTemplateParams:
    def test_from_system(self):
        system = System.for_distro("ubuntu", "amd64", "24.04")
        assert derive_template_params(system) == {
            "version": "24.04",
            "distro": "ubuntu",
            "family": "debian-family",
            "arch": "amd64",
        }
