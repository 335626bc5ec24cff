"""
L0 Data — Boot chain packages.

``GRUB`` covers legacy builds. It also carries a few packages that are
only wanted where image size does not matter, so trusted boot never
sees them. ``SYSTEMD_BOOT`` is the trusted boot counterpart.
"""

from __future__ import annotations

from pkgmatrix.core.models.system import Architecture, Distro, Family
from pkgmatrix.core.services.package_catalog.data.catalog import Catalog
from pkgmatrix.core.services.package_catalog.domain.version_constraint import COMMON

ANY = Architecture.ANY
AMD64 = Architecture.AMD64
ARM64 = Architecture.ARM64

GRUB = Catalog.build(
    "grub",
    distros={
        Distro.UBUNTU: {
            ANY: {COMMON: ["zfsutils-linux"]},
        },
    },
    families={
        Family.DEBIAN: {
            ANY: {
                COMMON: ["kbd", "lldpd", "shim-signed", "snmpd", "squashfs-tools"],
            },
            AMD64: {
                COMMON: [
                    "grub2",
                    "grub-efi-amd64-bin",
                    "grub-efi-amd64-signed",
                    "grub-pc-bin",
                    "grub2-common",
                ],
            },
            ARM64: {
                COMMON: ["grub-efi-arm64", "grub-efi-arm64-bin", "grub-efi-arm64-signed"],
            },
        },
        Family.REDHAT: {
            ANY: {COMMON: ["grub2"]},
            AMD64: {COMMON: ["grub2-efi-x64", "grub2-efi-x64-modules", "grub2-pc", "shim-x64"]},
            ARM64: {COMMON: ["grub2-efi-aa64", "grub2-efi-aa64-modules", "shim-aa64"]},
        },
        Family.ALPINE: {
            ANY: {COMMON: ["grub", "grub-efi"]},
            AMD64: {COMMON: ["grub-bios"]},
        },
        Family.SUSE: {
            ANY: {COMMON: ["nethogs", "patch", "shim", "iw"]},
            AMD64: {COMMON: ["grub2-i386-pc", "grub2-x86_64-efi", "kernel-firmware-all"]},
            ARM64: {
                COMMON: [
                    "bcm43xx-firmware",
                    "grub2-arm64-efi",
                    "kernel-firmware-ath10k",
                    "kernel-firmware-ath11k",
                    "kernel-firmware-atheros",
                    "kernel-firmware-bluetooth",
                    "kernel-firmware-brcm",
                    "kernel-firmware-iwlwifi",
                    "kernel-firmware-network",
                    "kernel-firmware-realtek",
                    "kernel-firmware-serial",
                    "kernel-firmware-usb-network",
                ],
            },
        },
    },
)

SYSTEMD_BOOT = Catalog.build(
    "systemd-boot",
    distros={
        Distro.UBUNTU: {
            ANY: {
                COMMON: ["systemd"],
                # systemd-boot became its own package in 24.04
                ">=24.04": ["iucode-tool", "kmod", "linux-base", "systemd-boot"],
            },
        },
    },
)
