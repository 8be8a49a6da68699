"""Core tokencraft functionality: IR, validation, resolution, compilation, export."""

from . import ir
from .errors import (
    ConfigValidationError,
    ErrorContext,
    NonTerminalReferenceError,
    ResolutionError,
    TokenCraftError,
    UnknownModeError,
    UnsupportedFormatError,
)
from .merge import deep_merge, extend_theme, merge_tokenspec
from .pipeline import ExportReport, export_tokens, plan_jobs, run_jobs
from .resolver import ResolutionPolicy, ResolvedTheme, TokenResolver, resolve, resolve_theme
from .style_compiler import compile_component, compile_style, render_rule
from .tokenspec_loader import (
    TokenSpecError,
    create_default_tokenspec,
    load_tokenspec,
    save_tokenspec,
)
from .validator import parse_tokenspec, validate_tokenspec

__all__ = [
    "ir",
    "TokenCraftError",
    "ConfigValidationError",
    "ErrorContext",
    "NonTerminalReferenceError",
    "ResolutionError",
    "UnknownModeError",
    "UnsupportedFormatError",
    "deep_merge",
    "extend_theme",
    "merge_tokenspec",
    "ResolutionPolicy",
    "ResolvedTheme",
    "TokenResolver",
    "resolve",
    "resolve_theme",
    "compile_component",
    "compile_style",
    "render_rule",
    "TokenSpecError",
    "create_default_tokenspec",
    "load_tokenspec",
    "save_tokenspec",
    "parse_tokenspec",
    "validate_tokenspec",
    "ExportReport",
    "export_tokens",
    "plan_jobs",
    "run_jobs",
]
