"""
Package catalog service — package re-exports.

    from pkgmatrix.core.services.package_catalog import resolve_packages

Each symbol lives in its single-responsibility module inside the
appropriate layer (data → domain → resolver).
"""

# ── L0: Data ──
from pkgmatrix.core.services.package_catalog.data import (  # noqa: F401
    DEFAULT_CATALOGS,
    Catalog,
    CatalogSet,
)
from pkgmatrix.core.services.package_catalog.data.catalog_schema import (  # noqa: F401
    validate_catalog,
    validate_catalog_set,
)

# ── L1: Domain ──
from pkgmatrix.core.services.package_catalog.domain import (  # noqa: F401
    COMMON,
    ConstraintParseError,
    PackageCatalogError,
    TemplateError,
    TemplateExecutionError,
    TemplateSyntaxError,
    VersionParseError,
    constraint_matches,
    derive_template_params,
    expand_package_list,
    expand_package_name,
    parse_constraint,
    parse_version,
)

# ── L2: Resolver ──
from pkgmatrix.core.services.package_catalog.resolver import (  # noqa: F401
    filter_catalog,
    resolve_packages,
    select_catalogs,
)
