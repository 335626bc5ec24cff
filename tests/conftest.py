"""
Shared test fixtures and configuration.
"""

import logging

import pytest

from pkgmatrix.core.models.system import Architecture, Distro, Family, System
from pkgmatrix.core.services.package_catalog.data import CatalogSet
from pkgmatrix.core.services.package_catalog.data.catalog import Catalog


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo any root-logger changes made by setup_logging() (CLI runs)."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def ubuntu_2404() -> System:
    return System(
        distro=Distro.UBUNTU,
        family=Family.DEBIAN,
        arch=Architecture.AMD64,
        version="24.04",
    )


def make_catalog_set(**catalogs: Catalog) -> CatalogSet:
    """Build a CatalogSet with empty catalogs except the ones given."""
    fields = {
        name: catalogs.get(name, Catalog.build(name))
        for name in (
            "base", "kernel", "kernel_trusted_boot", "grub",
            "systemd_boot", "initrd", "boards",
        )
    }
    common = tuple(catalogs.get("common", ("common-pkg",)))
    return CatalogSet(common=common, **fields)


@pytest.fixture
def catalog_set_factory():
    """Factory for small CatalogSets (see ``make_catalog_set``)."""
    return make_catalog_set
