"""
L0 Data — Catalog validator.

Checks that every catalog entry is well formed before anything is
resolved from it: constraint keys parse, board keys name a known board,
and every package entry is a non-empty, well-formed template.

The resolver tolerates bad entries (they are logged and skipped), so
this is what ``pkgmatrix catalogs check`` and the test suite use to
catch authoring mistakes early.
"""

from __future__ import annotations

import logging

from pkgmatrix.core.models.system import Board
from pkgmatrix.core.services.package_catalog.data import CatalogSet
from pkgmatrix.core.services.package_catalog.data.catalog import Catalog
from pkgmatrix.core.services.package_catalog.domain.errors import (
    ConstraintParseError,
    TemplateSyntaxError,
)
from pkgmatrix.core.services.package_catalog.domain.name_template import placeholders
from pkgmatrix.core.services.package_catalog.domain.version_constraint import (
    is_common,
    parse_constraint,
)

logger = logging.getLogger(__name__)

VALID_BOARD_KEYS = {b.value for b in Board if b is not Board.GENERIC}


def _check_packages(where: str, packages: tuple[str, ...] | list[str]) -> list[str]:
    errors: list[str] = []
    if not packages:
        errors.append(f"{where}: empty package list")
    for pkg in packages:
        if not isinstance(pkg, str) or not pkg.strip():
            errors.append(f"{where}: empty package name")
            continue
        if pkg != pkg.strip():
            errors.append(f"{where}: package {pkg!r} has surrounding whitespace")
        try:
            placeholders(pkg)
        except TemplateSyntaxError as exc:
            errors.append(f"{where}: {exc}")
    return errors


def validate_catalog(catalog: Catalog, *, board_keys: bool = False) -> list[str]:
    """Validate one catalog.

    Args:
        catalog: The catalog to check.
        board_keys: Innermost keys are board models, not constraints.

    Returns:
        List of error strings (empty = valid).
    """
    errors: list[str] = []
    for entry in catalog.entries():
        where = f"{catalog.name}[{entry.selector.value}][{entry.arch.value}][{entry.key}]"
        if board_keys:
            if entry.key not in VALID_BOARD_KEYS:
                errors.append(
                    f"{where}: unknown board {entry.key!r} "
                    f"(expected one of {sorted(VALID_BOARD_KEYS)})"
                )
        elif not is_common(entry.key):
            try:
                parse_constraint(entry.key)
            except ConstraintParseError as exc:
                errors.append(f"{where}: {exc}")
        errors.extend(_check_packages(where, entry.packages))
    return errors


def validate_catalog_set(catalog_set: CatalogSet) -> dict[str, list[str]]:
    """Validate every catalog of a set.

    Returns:
        Dict of catalog name → error list, only for catalogs with errors.
    """
    all_errors: dict[str, list[str]] = {}

    common_errors = _check_packages("common", catalog_set.common)
    if common_errors:
        all_errors["common"] = common_errors

    for name, catalog in catalog_set.catalogs().items():
        errs = validate_catalog(catalog, board_keys=catalog is catalog_set.boards)
        if errs:
            all_errors[name] = errs

    if all_errors:
        logger.warning(
            "Catalog validation found errors in %d catalog(s): %s",
            len(all_errors), ", ".join(sorted(all_errors)),
        )
    return all_errors
