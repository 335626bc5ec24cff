"""
Build model — global build flags for one image build.

Loaded from build.yml. These are the flags the resolver takes as
explicit parameters; nothing below the CLI reads them from ambient
process state.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from pkgmatrix.core.models.system import Board

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class BuildConfig(BaseModel):
    """Build flags that change which packages are resolved."""

    trusted_boot: bool = False
    board: Board = Board.GENERIC
    log_level: str = "WARNING"

    # Template handling for ``{{.key}}`` package names
    expand_templates: bool = False
    derive_template_params: bool = False
    template_params: dict[str, str] = Field(default_factory=dict)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level
