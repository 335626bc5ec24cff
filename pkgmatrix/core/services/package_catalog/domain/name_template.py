"""
L1 Domain — Package-name template expansion (pure).

Catalog entries may carry one ``{{.key}}`` placeholder, e.g.
``linux-image-generic-hwe-{{.version}}``. Expansion substitutes every
placeholder from a string-keyed parameter map. A missing key is an
error, never an empty substitution. A stray ``}}`` with no opening
``{{`` is rejected as a syntax error rather than kept as literal text.
No I/O, no subprocess.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Mapping

from pkgmatrix.core.services.package_catalog.domain.errors import (
    TemplateError,
    TemplateExecutionError,
    TemplateSyntaxError,
)

if TYPE_CHECKING:
    from pkgmatrix.core.models.system import System

_OPEN = "{{"
_CLOSE = "}}"
_FIELD_RE = re.compile(r"^\s*\.([A-Za-z_][A-Za-z0-9_]*)\s*$")


def _scan(entry: str) -> list[str | tuple[str]]:
    """Split an entry into literal text and ``(key,)`` placeholder parts."""
    parts: list[str | tuple[str]] = []
    pos = 0
    while True:
        start = entry.find(_OPEN, pos)
        stray = entry.find(_CLOSE, pos)
        if stray != -1 and (start == -1 or stray < start):
            raise TemplateSyntaxError(entry, f"Unexpected '}}}}' at offset {stray}")
        if start == -1:
            if pos < len(entry):
                parts.append(entry[pos:])
            return parts
        end = entry.find(_CLOSE, start + len(_OPEN))
        if end == -1:
            raise TemplateSyntaxError(entry, f"Unclosed '{{{{' at offset {start}")
        body = entry[start + len(_OPEN):end]
        m = _FIELD_RE.match(body)
        if not m:
            raise TemplateSyntaxError(entry, f"Bad placeholder {{{{{body}}}}}")
        if start > pos:
            parts.append(entry[pos:start])
        parts.append((m.group(1),))
        pos = end + len(_CLOSE)


def placeholders(entry: str) -> list[str]:
    """Return the keys referenced by an entry, in order.

    Raises:
        TemplateSyntaxError: Malformed placeholder.
    """
    return [p[0] for p in _scan(entry) if isinstance(p, tuple)]


def is_templated(entry: str) -> bool:
    """Does this entry contain template markers at all?"""
    return _OPEN in entry or _CLOSE in entry


def expand_package_name(entry: str, params: Mapping[str, str]) -> str:
    """Substitute every ``{{.key}}`` placeholder in one package name.

    Raises:
        TemplateSyntaxError: Malformed placeholder syntax.
        TemplateExecutionError: A referenced key is not in ``params``.
    """
    if not is_templated(entry):
        return entry
    out: list[str] = []
    for part in _scan(entry):
        if isinstance(part, tuple):
            key = part[0]
            if key not in params:
                raise TemplateExecutionError(entry, key)
            out.append(str(params[key]))
        else:
            out.append(part)
    return "".join(out)


@dataclass
class ExpansionResult:
    """Outcome of expanding a list of entries.

    ``packages`` keeps input order for every entry that expanded;
    ``errors`` holds one error per entry that did not.
    """

    packages: list[str] = field(default_factory=list)
    errors: list[TemplateError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def expand_package_list(
    entries: Iterable[str],
    params: Mapping[str, str],
) -> ExpansionResult:
    """Expand every entry, collecting failures instead of stopping.

    Every entry is attempted in order, so the same input always yields
    the same packages and the same errors.
    """
    result = ExpansionResult()
    for entry in entries:
        try:
            result.packages.append(expand_package_name(entry, params))
        except TemplateError as exc:
            result.errors.append(exc)
    return result


def derive_template_params(system: System) -> dict[str, str]:
    """Template parameters that follow directly from a System.

    Callers opt into these; explicitly supplied parameters override
    them.
    """
    return {
        "version": system.version,
        "distro": system.distro.value,
        "family": system.family.value,
        "arch": system.arch.value,
    }
