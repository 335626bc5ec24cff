"""
L1 Domain — Package catalog error taxonomy.

Two kinds of failure are kept apart:

- caller input (``VersionParseError``): the System's version does not
  parse. The resolver degrades to unconditional entries.
- catalog authoring (``ConstraintParseError``, ``TemplateError``): a
  single entry is malformed. Only that entry is skipped.
"""

from __future__ import annotations


class PackageCatalogError(Exception):
    """Base class for every package-catalog failure."""


class VersionParseError(PackageCatalogError, ValueError):
    """A concrete version string is not a dotted numeric version."""

    def __init__(self, version: str, reason: str = "") -> None:
        self.version = version
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid version {version!r}{detail}")


class ConstraintParseError(PackageCatalogError, ValueError):
    """A version-range expression is malformed."""

    def __init__(self, constraint: str, reason: str) -> None:
        self.constraint = constraint
        self.reason = reason
        super().__init__(f"Invalid constraint {constraint!r}: {reason}")


class TemplateError(PackageCatalogError):
    """A package-name template could not be expanded."""

    def __init__(self, entry: str, message: str) -> None:
        self.entry = entry
        super().__init__(f"{message} in {entry!r}")


class TemplateSyntaxError(TemplateError):
    """Malformed ``{{.key}}`` placeholder."""


class TemplateExecutionError(TemplateError):
    """A placeholder references a key missing from the parameters."""

    def __init__(self, entry: str, key: str) -> None:
        self.key = key
        super().__init__(entry, f"No value for template key {key!r}")
