"""
Deep merge for extending token configurations.

Precedence is always override > base. Nested objects merge key by key;
any other value in the override (string, number, list) replaces the base
value wholesale. Lists are never merged element-wise, so repeated
overrides are not associative across non-object leaves: the last
override wins for scalar conflicts.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .errors import ConfigValidationError, UnknownModeError
from .ir.tokenspec import TokenConfig
from .validator import normalize_keys, parse_tokenspec, pydantic_issues

logger = logging.getLogger(__name__)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``.

    Neither input is mutated; the result shares no mutable state with them.
    """
    result: dict[str, Any] = copy.deepcopy(dict(base))

    for key, value in override.items():
        current = result.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = copy.deepcopy(value)

    return result


def merge_tokenspec(base: TokenConfig, override: TokenConfig | Mapping[str, Any]) -> TokenConfig:
    """Produce a new TokenConfig with ``override`` applied over ``base``.

    Args:
        base: Config to extend. Never mutated.
        override: Partial config document (camelCase keys) or a full config.

    Returns:
        New TokenConfig.

    Raises:
        ConfigValidationError: If the merged document no longer type-checks.
    """
    if isinstance(override, TokenConfig):
        override_doc = override.to_document()
    else:
        override_doc = normalize_keys(override)

    merged = deep_merge(base.to_document(), override_doc)
    try:
        return TokenConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigValidationError(pydantic_issues(e)) from e


def extend_theme(
    config: TokenConfig,
    base_mode: str,
    new_mode: str,
    overrides: Mapping[str, Any] | None = None,
) -> TokenConfig:
    """Add a theme built from an existing one plus overrides.

    Args:
        config: Source config.
        base_mode: Theme to start from; must be declared in the config.
        new_mode: Name of the theme to add (or replace).
        overrides: Partial theme document, e.g.
            ``{"colors": {"primary": {"500": "#e11d48"}}}``.

    Returns:
        New TokenConfig containing the extra theme. The result is fully
        re-validated, so overrides that break the shared namespace shape
        are rejected.

    Raises:
        UnknownModeError: If ``base_mode`` is not declared.
        ConfigValidationError: If the result is structurally invalid.
    """
    if base_mode not in config.theme.themes:
        raise UnknownModeError(base_mode, config.mode_names)

    base_theme = config.theme.themes[base_mode].model_dump(mode="json", by_alias=True)
    new_theme = deep_merge(base_theme, normalize_keys(overrides or {}))

    document = config.to_document()
    document["theme"]["themes"][new_mode] = new_theme
    logger.debug(f"Extended theme '{base_mode}' into '{new_mode}'")
    return parse_tokenspec(document)
