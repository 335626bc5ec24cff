"""
L0 Data — Immutable package catalog.

A catalog answers one question: which package entries does a
(selector, architecture) pair carry, keyed by version constraint?

Distros and families live in two separate maps and are always queried
separately. A family is never inferred from a distro here.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, NamedTuple

from pkgmatrix.core.models.system import Architecture, Distro, Family, System

# constraint key → ordered package entries
VersionMap = Mapping[str, tuple[str, ...]]
# architecture axis → VersionMap
ArchMap = Mapping[Architecture, VersionMap]

_EMPTY: VersionMap = MappingProxyType({})


class AxisLookup(NamedTuple):
    """One of the four per-catalog lookups against a System."""

    selector: Distro | Family
    arch: Architecture
    entries: VersionMap


class CatalogEntry(NamedTuple):
    """Flattened view of a single constraint entry (for validation/display)."""

    selector: Distro | Family
    arch: Architecture
    key: str
    packages: tuple[str, ...]


def _freeze(raw: Mapping | None) -> Mapping:
    """Deep-freeze ``{selector: {arch: {key: [pkgs]}}}`` keeping order."""
    frozen: dict = {}
    for selector, arches in (raw or {}).items():
        frozen_arches: dict = {}
        for arch, versions in arches.items():
            frozen_arches[Architecture(arch)] = MappingProxyType(
                {str(key): tuple(pkgs) for key, pkgs in versions.items()}
            )
        frozen[selector] = MappingProxyType(frozen_arches)
    return MappingProxyType(frozen)


@dataclass(frozen=True, eq=False)
class Catalog:
    """One named package table covering one concern (base, kernel, ...)."""

    name: str
    distros: Mapping[Distro, ArchMap]
    families: Mapping[Family, ArchMap]

    @classmethod
    def build(
        cls,
        name: str,
        *,
        distros: Mapping | None = None,
        families: Mapping | None = None,
    ) -> Catalog:
        """Build a catalog from plain nested dicts/lists, freezing them.

        Raises:
            ValueError: A selector is in the wrong map.
        """
        for key in distros or {}:
            if not isinstance(key, Distro):
                raise ValueError(f"{name}: distro map has non-distro key {key!r}")
        for key in families or {}:
            if not isinstance(key, Family):
                raise ValueError(f"{name}: family map has non-family key {key!r}")
        return cls(name=name, distros=_freeze(distros), families=_freeze(families))

    # ── Lookups ─────────────────────────────────────────────────

    def for_distro(self, distro: Distro, arch: Architecture) -> VersionMap:
        """Entries for a distro on one arch axis (empty when absent)."""
        return self.distros.get(distro, {}).get(arch, _EMPTY)

    def for_family(self, family: Family, arch: Architecture) -> VersionMap:
        """Entries for a family on one arch axis (empty when absent)."""
        return self.families.get(family, {}).get(arch, _EMPTY)

    def axis_lookups(self, system: System) -> list[AxisLookup]:
        """The four lookups for a System, in merge order.

        (distro, any), (family, any), (distro, arch), (family, arch).
        """
        any_arch = Architecture.ANY
        return [
            AxisLookup(system.distro, any_arch, self.for_distro(system.distro, any_arch)),
            AxisLookup(system.family, any_arch, self.for_family(system.family, any_arch)),
            AxisLookup(system.distro, system.arch, self.for_distro(system.distro, system.arch)),
            AxisLookup(system.family, system.arch, self.for_family(system.family, system.arch)),
        ]

    # ── Introspection ───────────────────────────────────────────

    def entries(self) -> Iterator[CatalogEntry]:
        """Walk every constraint entry, distros first, in declaration order."""
        for table in (self.distros, self.families):
            for selector, arches in table.items():
                for arch, versions in arches.items():
                    for key, packages in versions.items():
                        yield CatalogEntry(selector, arch, key, packages)

    def to_dict(self) -> dict:
        """Plain JSON-ready representation."""
        def _plain(table: Mapping) -> dict:
            return {
                sel.value: {
                    arch.value: {key: list(pkgs) for key, pkgs in versions.items()}
                    for arch, versions in arches.items()
                }
                for sel, arches in table.items()
            }

        return {
            "name": self.name,
            "distros": _plain(self.distros),
            "families": _plain(self.families),
        }
