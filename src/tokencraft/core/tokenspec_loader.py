"""
Token config persistence layer.

Reads and writes token configurations as tokencraft.yaml (or a .json
document) in the project root.

Default location: {project_root}/tokencraft.yaml
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigValidationError
from .ir.tokenspec import TokenConfig
from .validator import parse_tokenspec

logger = logging.getLogger(__name__)

TOKENSPEC_FILE = "tokencraft.yaml"


class TokenSpecError(Exception):
    """Error loading or saving a token config."""

    pass


# =============================================================================
# Path helpers
# =============================================================================


def get_tokenspec_path(location: Path) -> Path:
    """Get the config file path for a project root or explicit file."""
    if location.suffix.lower() in (".yaml", ".yml", ".json"):
        return location
    return location / TOKENSPEC_FILE


# =============================================================================
# Loading
# =============================================================================


def _read_document(path: Path) -> Any:
    content = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise TokenSpecError(f"Invalid JSON in {path}: {e}") from e
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise TokenSpecError(f"Invalid YAML in {path}: {e}") from e


def read_tokenspec_document(location: Path) -> Any:
    """Read the raw config document without validating it.

    Raises:
        TokenSpecError: If the file is missing or not parseable.
    """
    path = get_tokenspec_path(location)
    if not path.exists():
        raise TokenSpecError(f"Token config not found: {path}")
    return _read_document(path)


def load_tokenspec(location: Path, *, use_defaults: bool = False) -> TokenConfig:
    """Load and validate a token config.

    Args:
        location: Project root or config file path.
        use_defaults: If True, return the default config when the file
            doesn't exist or is empty.

    Returns:
        Validated TokenConfig.

    Raises:
        TokenSpecError: If the file is missing (when use_defaults=False) or
            unreadable.
        ConfigValidationError: If the document is structurally invalid.
    """
    path = get_tokenspec_path(location)

    if not path.exists():
        if use_defaults:
            logger.debug(f"No {path.name} found, using defaults")
            return create_default_tokenspec()
        raise TokenSpecError(f"Token config not found: {path}")

    data = _read_document(path)
    if not data:
        if use_defaults:
            logger.warning(f"Empty token config at {path}, using defaults")
            return create_default_tokenspec()
        raise TokenSpecError(f"Empty token config: {path}")

    config = parse_tokenspec(data)
    logger.debug(f"Loaded token config from {path} ({len(config.mode_names)} theme(s))")
    return config


def save_tokenspec(location: Path, config: TokenConfig) -> Path:
    """Save a token config, as JSON when the target is a .json file.

    Returns:
        Path to the saved file.
    """
    path = get_tokenspec_path(location)
    data = config.to_document()

    if path.suffix.lower() == ".json":
        text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    else:
        text = yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info(f"Saved token config to {path}")
    return path


# =============================================================================
# Defaults
# =============================================================================


def _scale(*values: str) -> dict[str, str]:
    steps = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")
    return dict(zip(steps, values, strict=True))


_GRAY = _scale(
    "#f9fafb",
    "#f3f4f6",
    "#e5e7eb",
    "#d1d5db",
    "#9ca3af",
    "#6b7280",
    "#4b5563",
    "#374151",
    "#1f2937",
    "#111827",
    "#030712",
)

_BLUE = _scale(
    "#eff6ff",
    "#dbeafe",
    "#bfdbfe",
    "#93c5fd",
    "#60a5fa",
    "#3b82f6",
    "#2563eb",
    "#1d4ed8",
    "#1e40af",
    "#1e3a8a",
    "#172554",
)


def _default_document() -> dict[str, Any]:
    return {
        "version": "1.0",
        "name": "My Design System",
        "description": "Custom design system configuration",
        "theme": {
            "default": "light",
            "autoDetect": True,
            "storage": True,
            "themes": {
                "light": {
                    "colors": {"white": "#ffffff", "gray": dict(_GRAY), "primary": dict(_BLUE)},
                    "semantic": {
                        "text": {
                            "primary": "colors.gray.900",
                            "secondary": "colors.gray.700",
                            "inverse": "#ffffff",
                        },
                        "background": {"primary": "#ffffff", "secondary": "colors.gray.50"},
                        "border": {"primary": "colors.gray.200", "focus": "colors.primary.500"},
                        "interactive": {
                            "primary": "colors.primary.600",
                            "primaryHover": "colors.primary.700",
                            "secondary": "colors.gray.100",
                        },
                    },
                },
                "dark": {
                    "colors": {"white": "#ffffff", "gray": dict(_GRAY), "primary": dict(_BLUE)},
                    "semantic": {
                        "text": {
                            "primary": "colors.gray.50",
                            "secondary": "colors.gray.300",
                            "inverse": "colors.gray.900",
                        },
                        "background": {
                            "primary": "colors.gray.950",
                            "secondary": "colors.gray.900",
                        },
                        "border": {"primary": "colors.gray.800", "focus": "colors.primary.400"},
                        "interactive": {
                            "primary": "colors.primary.500",
                            "primaryHover": "colors.primary.400",
                            "secondary": "colors.gray.800",
                        },
                    },
                },
            },
        },
        "typography": {
            "fontFamily": {
                "sans": ["Inter", "-apple-system", "BlinkMacSystemFont", "Segoe UI", "sans-serif"],
                "mono": ["JetBrains Mono", "Fira Code", "Consolas", "monospace"],
            },
            "fontSize": {"sm": "0.875rem", "base": "1rem", "lg": "1.125rem", "xl": "1.25rem"},
            "fontWeight": {"normal": 400, "medium": 500, "semibold": 600, "bold": 700},
            "lineHeight": {"sm": "1.25rem", "base": "1.5rem", "lg": "1.75rem"},
        },
        "spacing": {
            "scale": {
                "1": "0.25rem",
                "2": "0.5rem",
                "3": "0.75rem",
                "4": "1rem",
                "6": "1.5rem",
                "8": "2rem",
            },
        },
        "effects": {
            "shadows": {
                "sm": "0 1px 3px 0 rgba(0, 0, 0, 0.1)",
                "md": "0 4px 6px -1px rgba(0, 0, 0, 0.1)",
            },
            "borderRadius": {"md": "0.375rem", "lg": "0.5rem"},
        },
        "responsive": {
            "autoDetect": True,
            "breakpoints": {
                "sm": {"min": "640px"},
                "md": {"min": "768px"},
                "lg": {"min": "1024px"},
                "xl": {"min": "1280px"},
            },
        },
        "tokens": {"prefix": "tc", "output": "./tokens", "formats": ["css", "ts"]},
        "components": {
            "output": "./components",
            "typescript": True,
            "library": {
                "button": {
                    "base": {
                        "display": "inline-flex",
                        "alignItems": "center",
                        "borderRadius": "effects.borderRadius.md",
                        "fontWeight": "typography.fontWeight.medium",
                    },
                    "variants": {
                        "default": {
                            "backgroundColor": "semantic.interactive.primary",
                            "color": "semantic.text.inverse",
                            "hover": {"backgroundColor": "semantic.interactive.primaryHover"},
                        },
                        "secondary": {
                            "backgroundColor": "semantic.interactive.secondary",
                            "color": "semantic.text.primary",
                        },
                    },
                    "sizes": {
                        "sm": {"paddingBlock": "spacing.1", "paddingInline": "spacing.3"},
                        "default": {"paddingBlock": "spacing.2", "paddingInline": "spacing.4"},
                        "lg": {"paddingBlock": "spacing.3", "paddingInline": "spacing.6"},
                    },
                    "states": {
                        "disabled": {"opacity": "0.5", "cursor": "not-allowed"},
                    },
                },
            },
        },
    }


def create_default_tokenspec() -> TokenConfig:
    """Create the default token config: light and dark themes plus a button."""
    try:
        return parse_tokenspec(_default_document())
    except ConfigValidationError as e:
        raise TokenSpecError(f"Default token config is invalid: {e}") from e
