"""
L0 Data — Board support packages.

Same shape as the other catalogs, except that the innermost key is a
board model (``rpi3``, ``rpi4``) instead of a version constraint.
"""

from __future__ import annotations

from pkgmatrix.core.models.system import Architecture, Board, Distro, Family
from pkgmatrix.core.services.package_catalog.data.catalog import Catalog

ARM64 = Architecture.ARM64

_SUSE_RPI = [
    "raspberrypi-eeprom",
    "raspberrypi-firmware",
    "raspberrypi-firmware-dt",
    "sysconfig",
    "sysconfig-netconfig",
    "sysvinit-tools",
    "wireless-tools",
    "wpa_supplicant",
]

BOARDS = Catalog.build(
    "boards",
    distros={
        # needs the non-free-firmware component enabled in the sources
        Distro.DEBIAN: {
            ARM64: {Board.RPI4.value: ["raspi-firmware"]},
        },
        Distro.ARCH: {
            ARM64: {
                Board.RPI3.value: ["linux-rpi"],
                Board.RPI4.value: ["linux-rpi4"],
            },
        },
    },
    families={
        Family.SUSE: {
            ARM64: {
                Board.RPI3.value: _SUSE_RPI,
                Board.RPI4.value: _SUSE_RPI,
            },
        },
    },
)
