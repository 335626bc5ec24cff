"""
L2 Resolver — turns a System + build flags into a package list.
"""

from pkgmatrix.core.services.package_catalog.resolver.package_resolution import (  # noqa: F401
    filter_catalog,
    resolve_packages,
    select_catalogs,
)
