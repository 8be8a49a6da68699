"""
tokencraft - design-token compiler.

Compiles one declarative token configuration (themed color scales,
semantic roles, typography, spacing, effects) into CSS, SCSS, JSON,
JavaScript/TypeScript and Tailwind artifacts, one per theme mode where
the format calls for it.
"""

from __future__ import annotations

from ._version import __version__
from .core import ir
from .core.errors import (
    ConfigValidationError,
    ResolutionError,
    TokenCraftError,
    UnknownModeError,
    UnsupportedFormatError,
)
from .core.ir import TokenConfig
from .core.pipeline import export_tokens
from .core.resolver import ResolutionPolicy, resolve
from .core.tokenspec_loader import load_tokenspec

__all__ = [
    "__version__",
    "ir",
    "TokenConfig",
    "TokenCraftError",
    "ConfigValidationError",
    "ResolutionError",
    "UnknownModeError",
    "UnsupportedFormatError",
    "ResolutionPolicy",
    "export_tokens",
    "load_tokenspec",
    "resolve",
]
