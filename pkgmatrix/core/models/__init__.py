"""
Domain models — Pydantic types for package resolution.

All models are re-exported here for convenient access:

    from pkgmatrix.core.models import System, Distro, Family, BuildConfig
"""

from pkgmatrix.core.models.build import BuildConfig
from pkgmatrix.core.models.system import (
    DISTRO_FAMILY,
    Architecture,
    Board,
    Distro,
    Family,
    System,
    family_for,
    normalize_arch,
)

__all__ = [
    "DISTRO_FAMILY",
    "Architecture",
    "Board",
    # build.py
    "BuildConfig",
    "Distro",
    "Family",
    # system.py
    "System",
    "family_for",
    "normalize_arch",
]
