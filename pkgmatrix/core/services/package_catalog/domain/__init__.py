"""
L1 Domain — ``__init__.py`` re-exports all pure domain functions.

These functions have NO subprocess calls, NO filesystem access,
NO network calls. Pure input→output.
"""

from pkgmatrix.core.services.package_catalog.domain.errors import (  # noqa: F401
    ConstraintParseError,
    PackageCatalogError,
    TemplateError,
    TemplateExecutionError,
    TemplateSyntaxError,
    VersionParseError,
)
from pkgmatrix.core.services.package_catalog.domain.name_template import (  # noqa: F401
    ExpansionResult,
    derive_template_params,
    expand_package_list,
    expand_package_name,
    placeholders,
)
from pkgmatrix.core.services.package_catalog.domain.version_constraint import (  # noqa: F401
    COMMON,
    Constraint,
    Version,
    constraint_matches,
    is_common,
    parse_constraint,
    parse_version,
)
