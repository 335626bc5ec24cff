"""
L0 Data — Kernel packages.

``KERNEL`` is used by legacy (grub) builds. ``KERNEL_TRUSTED_BOOT`` holds
the slim kernel flavours so the trusted boot image stays as small as
possible: no firmware bundles, no extra module packages. The two catalogs
share no package names. Ubuntu has no trusted boot entry because its slim
kernel comes with the systemd-boot packages.
"""

from __future__ import annotations

from pkgmatrix.core.models.system import Architecture, Distro, Family
from pkgmatrix.core.services.package_catalog.data.catalog import Catalog
from pkgmatrix.core.services.package_catalog.domain.version_constraint import COMMON

ANY = Architecture.ANY
AMD64 = Architecture.AMD64
ARM64 = Architecture.ARM64

KERNEL = Catalog.build(
    "kernel",
    distros={
        Distro.UBUNTU: {
            ANY: {
                ">=20.04, != 24.10": ["linux-image-generic-hwe-{{.version}}"],
                # 24.10 ships no hwe kernel of its own
                "24.10": ["linux-image-generic-hwe-24.04"],
            },
        },
        Distro.DEBIAN: {
            AMD64: {COMMON: ["linux-image-amd64", "firmware-linux-free"]},
            ARM64: {COMMON: ["linux-image-arm64", "firmware-linux-free"]},
        },
    },
    families={
        Family.REDHAT: {ANY: {COMMON: ["kernel", "kernel-modules", "kernel-modules-extra"]}},
        Family.ALPINE: {ANY: {COMMON: ["linux-lts"]}},
        Family.SUSE: {ANY: {COMMON: ["kernel-default"]}},
    },
)

KERNEL_TRUSTED_BOOT = Catalog.build(
    "kernel-trusted-boot",
    distros={
        Distro.DEBIAN: {
            AMD64: {COMMON: ["linux-image-cloud-amd64"]},
            ARM64: {COMMON: ["linux-image-cloud-arm64"]},
        },
    },
    families={
        Family.REDHAT: {ANY: {COMMON: ["kernel-core", "kernel-modules-core"]}},
        Family.ALPINE: {ANY: {COMMON: ["linux-virt"]}},
        Family.SUSE: {ANY: {COMMON: ["kernel-default-base"]}},
    },
)
