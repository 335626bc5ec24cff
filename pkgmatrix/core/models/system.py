"""
System model — the target operating system a package set is resolved for.

A ``System`` is built per resolution call by whatever detected the
target (image build, CLI flags, tests). It carries no identity beyond
that call.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class Distro(str, Enum):
    """A specific operating-system distribution."""

    UBUNTU = "ubuntu"
    DEBIAN = "debian"
    FEDORA = "fedora"
    ROCKYLINUX = "rockylinux"
    ALMALINUX = "almalinux"
    RHEL = "rhel"
    CENTOS = "centos"
    OPENSUSE_LEAP = "opensuse-leap"
    OPENSUSE_TUMBLEWEED = "opensuse-tumbleweed"
    SLES = "sles"
    ALPINE = "alpine"
    ARCH = "arch"


class Family(str, Enum):
    """A group of distributions sharing one package ecosystem."""

    DEBIAN = "debian-family"
    REDHAT = "redhat-family"
    SUSE = "suse-family"
    ALPINE = "alpine-family"
    ARCH = "arch-family"


class Architecture(str, Enum):
    """CPU architecture axis of a catalog.

    ``ANY`` is the wildcard axis — entries stored under it apply
    regardless of the target's architecture. A ``System`` itself always
    has a concrete architecture.
    """

    ANY = "any"
    AMD64 = "amd64"
    ARM64 = "arm64"


class Board(str, Enum):
    """Board model, used only by the board-support catalog."""

    GENERIC = "generic"
    RPI3 = "rpi3"
    RPI4 = "rpi4"


# Explicit distro → family table. The resolver never consults it: a
# System always carries its family. Only callers that want a default
# family for a distro (the CLI) use this.
DISTRO_FAMILY: dict[Distro, Family] = {
    Distro.UBUNTU: Family.DEBIAN,
    Distro.DEBIAN: Family.DEBIAN,
    Distro.FEDORA: Family.REDHAT,
    Distro.ROCKYLINUX: Family.REDHAT,
    Distro.ALMALINUX: Family.REDHAT,
    Distro.RHEL: Family.REDHAT,
    Distro.CENTOS: Family.REDHAT,
    Distro.OPENSUSE_LEAP: Family.SUSE,
    Distro.OPENSUSE_TUMBLEWEED: Family.SUSE,
    Distro.SLES: Family.SUSE,
    Distro.ALPINE: Family.ALPINE,
    Distro.ARCH: Family.ARCH,
}

# Machine names as reported by ``uname -m`` and friends.
_ARCH_ALIASES: dict[str, Architecture] = {
    "amd64": Architecture.AMD64,
    "x86_64": Architecture.AMD64,
    "arm64": Architecture.ARM64,
    "aarch64": Architecture.ARM64,
}


def family_for(distro: Distro) -> Family:
    """Look up the default family of a distro in ``DISTRO_FAMILY``."""
    return DISTRO_FAMILY[distro]


def normalize_arch(machine: str) -> Architecture:
    """Map a machine name (``x86_64``, ``aarch64``, ...) to an Architecture.

    Raises:
        ValueError: Unknown machine name.
    """
    try:
        return _ARCH_ALIASES[machine.strip().lower()]
    except KeyError:
        raise ValueError(f"Unsupported architecture: {machine!r}") from None


class System(BaseModel):
    """Target OS descriptor for one resolution call.

    ``version`` is kept as given. It is parsed by the resolver, and a
    value that does not parse only affects version-gated entries.
    """

    model_config = ConfigDict(frozen=True)

    distro: Distro
    family: Family
    arch: Architecture
    version: str

    @field_validator("arch")
    @classmethod
    def _concrete_arch(cls, value: Architecture) -> Architecture:
        if value is Architecture.ANY:
            raise ValueError("a system needs a concrete architecture, not 'any'")
        return value

    @classmethod
    def for_distro(
        cls,
        distro: Distro | str,
        arch: Architecture | str,
        version: str,
    ) -> System:
        """Build a System whose family comes from ``DISTRO_FAMILY``."""
        distro = Distro(distro)
        if not isinstance(arch, Architecture):
            arch = normalize_arch(arch)
        return cls(distro=distro, family=family_for(distro), arch=arch, version=version)

    def describe(self) -> str:
        """Short human label, e.g. ``ubuntu 24.04 (debian-family/amd64)``."""
        return f"{self.distro.value} {self.version} ({self.family.value}/{self.arch.value})"
