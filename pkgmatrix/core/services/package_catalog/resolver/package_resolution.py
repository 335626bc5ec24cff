"""
L2 Resolver — Package-set resolution.

Turns a System + boot mode into the ordered list of OS packages to
install. Pure: reads frozen catalogs, writes nothing, and its only side
effect is diagnostic logging.

Merge order:
  1. The common package list.
  2. Base, then the mode catalogs:
       trusted boot → kernel-trusted-boot, systemd-boot
       legacy       → kernel, grub, initrd
  3. Board support, when a non-generic board is requested.

Within a catalog: (distro, any), (family, any), (distro, arch),
(family, arch), then constraint entries in declaration order.
Duplicates are kept.

Version handling: a System whose version does not parse degrades to
unconditional (``Common``) entries only, for every catalog. The
resolver never raises on a bad version.
"""

from __future__ import annotations

import logging
from typing import Mapping

from pkgmatrix.core.models.system import Board, System
from pkgmatrix.core.services.package_catalog.data import DEFAULT_CATALOGS, CatalogSet
from pkgmatrix.core.services.package_catalog.data.catalog import AxisLookup, Catalog
from pkgmatrix.core.services.package_catalog.domain.errors import (
    ConstraintParseError,
    VersionParseError,
)
from pkgmatrix.core.services.package_catalog.domain.name_template import (
    derive_template_params,
    expand_package_list,
)
from pkgmatrix.core.services.package_catalog.domain.version_constraint import (
    Version,
    is_common,
    parse_constraint,
    parse_version,
)

logger = logging.getLogger(__name__)


def select_catalogs(
    catalog_set: CatalogSet,
    *,
    trusted_boot: bool,
    board: Board | None = None,
) -> list[Catalog]:
    """Catalogs that apply to a boot mode, in merge order.

    The common list is not a catalog and is always prepended by
    ``resolve_packages``.
    """
    selected = [catalog_set.base]
    if trusted_boot:
        selected += [catalog_set.kernel_trusted_boot, catalog_set.systemd_boot]
    else:
        selected += [catalog_set.kernel, catalog_set.grub, catalog_set.initrd]
    if board is not None and board is not Board.GENERIC:
        selected.append(catalog_set.boards)
    return selected


def _version_entries(
    catalog: Catalog,
    lookup: AxisLookup,
    version: Version | None,
    log: logging.Logger,
) -> list[str]:
    """Filter one axis lookup through the version constraints."""
    packages: list[str] = []
    for constraint, entries in lookup.entries.items():
        fields = {
            "catalog": catalog.name,
            "selector": lookup.selector.value,
            "arch": lookup.arch.value,
            "constraint": constraint,
            "version": str(version) if version else None,
        }
        if is_common(constraint):
            log.debug("Adding unconditional packages", extra={**fields, "packages": list(entries)})
            packages.extend(entries)
            continue
        if version is None:
            log.debug("Skipping version-gated packages, no usable version", extra=fields)
            continue
        try:
            parsed = parse_constraint(constraint)
        except ConstraintParseError as exc:
            log.error(
                "Skipping entry with invalid constraint in %s: %s",
                catalog.name, exc, extra=fields,
            )
            continue
        matched = parsed.check(version)
        log.debug(
            "Constraint %s %s version %s",
            constraint, "matches" if matched else "does not match", version,
            extra={**fields, "matched": matched},
        )
        if matched:
            packages.extend(entries)
    return packages


def _board_entries(
    catalog: Catalog,
    lookup: AxisLookup,
    board: Board,
    log: logging.Logger,
) -> list[str]:
    """Filter one board-catalog lookup down to the requested board."""
    entries = lookup.entries.get(board.value, ())
    if entries:
        log.debug(
            "Adding board packages",
            extra={
                "catalog": catalog.name,
                "selector": lookup.selector.value,
                "arch": lookup.arch.value,
                "board": board.value,
                "packages": list(entries),
            },
        )
    return list(entries)


def filter_catalog(
    catalog: Catalog,
    system: System,
    version: Version | None,
    *,
    board: Board | None = None,
    log: logging.Logger | None = None,
) -> list[str]:
    """Packages one catalog contributes for a System.

    Args:
        catalog: Catalog to read.
        system: Target system (distro, family and arch are used).
        version: Parsed system version, or ``None`` when it did not
            parse (only ``Common`` entries are then returned).
        board: When given, the catalog is keyed by board instead of
            by version constraint.
        log: Diagnostics sink (default: this module's logger).
    """
    log = log or logger
    packages: list[str] = []
    for lookup in catalog.axis_lookups(system):
        if board is not None:
            packages.extend(_board_entries(catalog, lookup, board, log))
        else:
            packages.extend(_version_entries(catalog, lookup, version, log))
    return packages


def resolve_packages(
    system: System,
    *,
    trusted_boot: bool = False,
    board: Board | None = None,
    expand_templates: bool = False,
    template_params: Mapping[str, str] | None = None,
    derive_params: bool = False,
    catalogs: CatalogSet = DEFAULT_CATALOGS,
    log: logging.Logger | None = None,
) -> list[str]:
    """Resolve the ordered package list for a System.

    Args:
        system: Target OS descriptor.
        trusted_boot: Trusted boot (systemd-boot) instead of legacy (grub).
        board: Board model; non-generic boards add board-support packages.
        expand_templates: Expand ``{{.key}}`` placeholders. When False,
            placeholders are returned as literal text.
        template_params: Parameters for expansion.
        derive_params: Seed parameters from the System (``version``,
            ``distro``, ``family``, ``arch``); ``template_params`` win.
        catalogs: Catalog set to read (default: the canonical one).
        log: Diagnostics sink (default: this module's logger).

    Returns:
        Flat ordered list of package names. Not de-duplicated.
    """
    log = log or logger

    try:
        version: Version | None = parse_version(system.version)
    except VersionParseError as exc:
        log.warning(
            "%s; resolving unconditional packages only for %s",
            exc, system.describe(),
            extra={"version": system.version},
        )
        version = None

    packages: list[str] = list(catalogs.common)
    for catalog in select_catalogs(catalogs, trusted_boot=trusted_boot, board=board):
        if catalog is catalogs.boards:
            contributed = filter_catalog(catalog, system, version, board=board, log=log)
        else:
            contributed = filter_catalog(catalog, system, version, log=log)
        log.debug(
            "Catalog %s contributed %d package(s)", catalog.name, len(contributed),
            extra={"catalog": catalog.name, "packages": contributed},
        )
        packages.extend(contributed)

    if expand_templates:
        params: dict[str, str] = derive_template_params(system) if derive_params else {}
        params.update(template_params or {})
        result = expand_package_list(packages, params)
        for err in result.errors:
            log.error("Dropping package entry: %s", err, extra={"entry": err.entry})
        packages = result.packages

    log.info(
        "Resolved %d package(s) for %s (%s)",
        len(packages), system.describe(), "trusted boot" if trusted_boot else "legacy",
    )
    return packages
