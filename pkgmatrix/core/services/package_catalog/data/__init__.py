"""
L0 Data — The canonical catalog set.

Catalogs are module-level constants built once at import time and never
mutated afterwards. ``DEFAULT_CATALOGS`` bundles them for the resolver;
tests build their own ``CatalogSet`` to exercise the merge logic.
"""

from __future__ import annotations

from dataclasses import dataclass

from pkgmatrix.core.services.package_catalog.data.base import BASE
from pkgmatrix.core.services.package_catalog.data.boards import BOARDS
from pkgmatrix.core.services.package_catalog.data.bootloader import GRUB, SYSTEMD_BOOT
from pkgmatrix.core.services.package_catalog.data.catalog import (  # noqa: F401
    AxisLookup,
    Catalog,
    CatalogEntry,
)
from pkgmatrix.core.services.package_catalog.data.common import COMMON_PACKAGES
from pkgmatrix.core.services.package_catalog.data.initrd import INITRD
from pkgmatrix.core.services.package_catalog.data.kernel import KERNEL, KERNEL_TRUSTED_BOOT


@dataclass(frozen=True, eq=False)
class CatalogSet:
    """The fixed named catalogs the resolver draws from."""

    common: tuple[str, ...]
    base: Catalog
    kernel: Catalog
    kernel_trusted_boot: Catalog
    grub: Catalog
    systemd_boot: Catalog
    initrd: Catalog
    boards: Catalog

    def catalogs(self) -> dict[str, Catalog]:
        """Every catalog by name, in merge order."""
        return {
            c.name: c
            for c in (
                self.base,
                self.kernel,
                self.kernel_trusted_boot,
                self.grub,
                self.systemd_boot,
                self.initrd,
                self.boards,
            )
        }

    def get(self, name: str) -> Catalog | None:
        """Look up a catalog by name."""
        return self.catalogs().get(name)


DEFAULT_CATALOGS = CatalogSet(
    common=COMMON_PACKAGES,
    base=BASE,
    kernel=KERNEL,
    kernel_trusted_boot=KERNEL_TRUSTED_BOOT,
    grub=GRUB,
    systemd_boot=SYSTEMD_BOOT,
    initrd=INITRD,
    boards=BOARDS,
)
