"""
Structural validation for token configurations.

Collects every violation in one pass so a broken config can be fixed in
one edit cycle instead of one error at a time. Only structural and
referential shape is checked; visual or accessibility correctness of the
values is out of scope.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .errors import ConfigValidationError
from .ir.tokenspec import COLOR_SCALE_STEPS, TokenConfig

logger = logging.getLogger(__name__)


class TokenSpecValidationResult:
    """Result of token config validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.config: TokenConfig | None = None

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def __repr__(self) -> str:
        return (
            f"TokenSpecValidationResult(errors={len(self.errors)}, warnings={len(self.warnings)})"
        )


def pydantic_issues(exc: ValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into dotted-path messages."""
    issues = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        issues.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return issues


def normalize_keys(data: Any) -> Any:
    """Recursively stringify mapping keys.

    YAML reads ``50: "#f9fafb"`` with an integer key; color scale steps and
    spacing keys are always addressed as strings.
    """
    if isinstance(data, Mapping):
        return {str(key): normalize_keys(value) for key, value in data.items()}
    if isinstance(data, list):
        return [normalize_keys(item) for item in data]
    return data


def _shape(theme: Mapping[str, Any]) -> dict[str, set[str]]:
    """Namespace shape of one theme: scale/category name -> inner keys."""
    shape: dict[str, set[str]] = {}
    for namespace in ("colors", "semantic"):
        section = theme.get(namespace)
        if not isinstance(section, Mapping):
            continue
        for name, value in section.items():
            key = f"{namespace}.{name}"
            shape[key] = set(value) if isinstance(value, Mapping) else set()
    return shape


def _check_themes(theme_section: Mapping[str, Any], result: TokenSpecValidationResult) -> None:
    themes = theme_section.get("themes")
    if not isinstance(themes, Mapping):
        result.add_error("theme.themes must be an object")
        return
    if not themes:
        result.add_error("theme.themes must declare at least one theme")
        return

    default = theme_section.get("default", "light")
    if default not in themes:
        result.add_error(
            f"theme.default must be one of: {', '.join(themes)} (got {default!r})"
        )

    for name, theme in themes.items():
        if not isinstance(theme, Mapping):
            result.add_error(f'theme "{name}" must be an object')
            continue
        if "colors" not in theme:
            result.add_error(f'theme "{name}" is missing colors')
        if "semantic" not in theme:
            result.add_error(f'theme "{name}" is missing semantic')

        colors = theme.get("colors")
        if isinstance(colors, Mapping):
            for scale_name, scale in colors.items():
                if not isinstance(scale, Mapping):
                    continue
                missing = [step for step in COLOR_SCALE_STEPS if step not in scale]
                extra = sorted(str(k) for k in scale if str(k) not in COLOR_SCALE_STEPS)
                if missing:
                    result.add_error(
                        f'theme "{name}": color scale "{scale_name}" is missing steps '
                        f"{', '.join(missing)}"
                    )
                if extra:
                    result.add_error(
                        f'theme "{name}": color scale "{scale_name}" has unknown steps '
                        f"{', '.join(extra)}"
                    )

    # Every theme must expose the reference theme's namespace shape
    reference_name = default if default in themes else next(iter(themes))
    reference = themes[reference_name]
    if not isinstance(reference, Mapping):
        return
    reference_shape = _shape(reference)
    for name, theme in themes.items():
        if name == reference_name or not isinstance(theme, Mapping):
            continue
        shape = _shape(theme)
        for key in sorted(reference_shape.keys() - shape.keys()):
            result.add_error(f'theme "{name}" is missing {key} (declared by "{reference_name}")')
        for key in sorted(shape.keys() - reference_shape.keys()):
            result.add_error(f'theme "{name}" declares {key} not present in "{reference_name}"')
        for key in sorted(reference_shape.keys() & shape.keys()):
            if reference_shape[key] != shape[key]:
                diff = sorted(reference_shape[key] ^ shape[key])
                result.add_error(
                    f'theme "{name}": {key} keys differ from "{reference_name}" '
                    f"({', '.join(diff)})"
                )


def _check_tokens(tokens: Mapping[str, Any], result: TokenSpecValidationResult) -> None:
    from tokencraft.emitters import SUPPORTED_FORMATS

    if not tokens.get("prefix"):
        result.add_error("tokens.prefix is required")
    if not tokens.get("output"):
        result.add_error("tokens.output is required")

    formats = tokens.get("formats")
    if not isinstance(formats, list):
        result.add_error("tokens.formats must be a list")
        return
    for fmt in formats:
        if str(fmt).lower() not in SUPPORTED_FORMATS:
            result.add_warning(f"tokens.formats: '{fmt}' is not a supported format")


def validate_tokenspec(raw: Any) -> TokenSpecValidationResult:
    """Validate a raw config document.

    Args:
        raw: Parsed config document (dict from YAML/JSON).

    Returns:
        TokenSpecValidationResult with all errors and warnings; ``config``
        is set only when the document is valid.
    """
    result = TokenSpecValidationResult()

    if not isinstance(raw, Mapping):
        result.add_error("configuration must be an object")
        return result

    raw = normalize_keys(raw)

    if not raw.get("version"):
        result.add_error("version is required")

    theme_section = raw.get("theme")
    if not isinstance(theme_section, Mapping):
        result.add_error("theme configuration is required")
    else:
        _check_themes(theme_section, result)

    tokens = raw.get("tokens")
    if not isinstance(tokens, Mapping):
        result.add_error("tokens configuration is required")
    else:
        _check_tokens(tokens, result)

    try:
        config = TokenConfig.model_validate(raw)
    except ValidationError as e:
        for issue in pydantic_issues(e):
            if issue not in result.errors:
                result.add_error(issue)
        config = None

    if result.is_valid:
        result.config = config
    else:
        logger.debug(f"Config validation found {len(result.errors)} error(s)")

    return result


def parse_tokenspec(raw: Any) -> TokenConfig:
    """Validate and build a TokenConfig.

    Raises:
        ConfigValidationError: With every issue found.
    """
    result = validate_tokenspec(raw)
    if not result.is_valid or result.config is None:
        raise ConfigValidationError(result.errors)
    for warning in result.warnings:
        logger.warning(warning)
    return result.config
