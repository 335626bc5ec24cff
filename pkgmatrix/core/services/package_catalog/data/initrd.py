"""
L0 Data — InitRD tooling.

The minimum needed to build an initrd with dracut. Legacy builds only.
"""

from __future__ import annotations

from pkgmatrix.core.models.system import Architecture, Distro, Family
from pkgmatrix.core.services.package_catalog.data.catalog import Catalog
from pkgmatrix.core.services.package_catalog.domain.version_constraint import COMMON

ANY = Architecture.ANY

INITRD = Catalog.build(
    "initrd",
    distros={
        Distro.UBUNTU: {
            # livenet support moved to its own package in 22.04
            ANY: {">=22.04": ["dracut-live"]},
        },
        Distro.DEBIAN: {
            ANY: {COMMON: ["dracut-live"]},
        },
    },
    families={
        Family.DEBIAN: {
            ANY: {
                COMMON: [
                    "dracut",
                    "dracut-network",
                    "isc-dhcp-common",
                    "isc-dhcp-client",
                    "cloud-guest-utils",
                ],
            },
        },
        Family.REDHAT: {
            ANY: {
                COMMON: [
                    "dracut",
                    "dracut-live",
                    "dracut-network",
                    "dracut-squash",
                    "squashfs-tools",
                    "dhcp-client",
                ],
            },
        },
        Family.SUSE: {
            ANY: {COMMON: ["dracut", "squashfs", "dhcp-client"]},
        },
    },
)
