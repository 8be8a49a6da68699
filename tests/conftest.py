"""Shared pytest fixtures for tokencraft tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from tokencraft.core.ir import TokenConfig
from tokencraft.core.validator import parse_tokenspec

GRAY = {
    "50": "#f9fafb",
    "100": "#f3f4f6",
    "200": "#e5e7eb",
    "300": "#d1d5db",
    "400": "#9ca3af",
    "500": "#6b7280",
    "600": "#4b5563",
    "700": "#374151",
    "800": "#1f2937",
    "900": "#111827",
    "950": "#030712",
}

BLUE = {
    "50": "#eff6ff",
    "100": "#dbeafe",
    "200": "#bfdbfe",
    "300": "#93c5fd",
    "400": "#60a5fa",
    "500": "#3b82f6",
    "600": "#2563eb",
    "700": "#1d4ed8",
    "800": "#1e40af",
    "900": "#1e3a8a",
    "950": "#172554",
}


@pytest.fixture
def token_document() -> dict[str, Any]:
    """Return a fresh two-theme config document (camelCase, as on disk)."""
    return {
        "version": "1.0",
        "name": "Test System",
        "theme": {
            "default": "light",
            "themes": {
                "light": {
                    "colors": {"white": "#ffffff", "gray": dict(GRAY), "primary": dict(BLUE)},
                    "semantic": {
                        "text": {"primary": "colors.gray.900", "inverse": "#ffffff"},
                        "background": {"primary": "#ffffff"},
                        "interactive": {
                            "primary": "colors.primary.600",
                            "primaryHover": "colors.primary.700",
                        },
                    },
                },
                # Same shape, different declaration order
                "dark": {
                    "colors": {"gray": dict(GRAY), "white": "#ffffff", "primary": dict(BLUE)},
                    "semantic": {
                        "interactive": {
                            "primaryHover": "colors.primary.400",
                            "primary": "colors.primary.500",
                        },
                        "background": {"primary": "colors.gray.950"},
                        "text": {"inverse": "colors.gray.900", "primary": "colors.gray.50"},
                    },
                },
            },
        },
        "typography": {
            "fontFamily": {"sans": ["Inter", "sans-serif"]},
            "fontSize": {"sm": "0.875rem", "lg": "1.125rem"},
            "fontWeight": {"medium": 500},
            "lineHeight": {"lg": "1.75rem"},
            "scales": {
                "heading": {"h1": {"fontSize": "2.25rem", "lineHeight": "2.5rem", "fontWeight": 700}}
            },
        },
        "spacing": {
            "scale": {"2": "0.5rem", "4": "1rem"},
            "semantic": {"component": {"padding": "1rem"}},
        },
        "effects": {
            "shadows": {"md": "0 4px 6px -1px rgba(0, 0, 0, 0.1)"},
            "borderRadius": {"md": "0.375rem"},
            "gradients": {"linear": {"primary": "linear-gradient(135deg, #3b82f6, #1d4ed8)"}},
        },
        "responsive": {
            "breakpoints": {"sm": {"min": "640px"}, "md": {"min": "768px", "max": "1023px"}},
            "containerSizes": {"sm": "640px"},
        },
        "tokens": {"prefix": "p", "output": "./tokens", "formats": ["css"]},
        "components": {
            "library": {
                "button": {
                    "base": {"display": "inline-flex", "borderRadius": "effects.borderRadius.md"},
                    "variants": {
                        "default": {
                            "backgroundColor": "semantic.interactive.primary",
                            "color": "semantic.text.inverse",
                            "hover": {"backgroundColor": "semantic.interactive.primaryHover"},
                        },
                        "ghost": {
                            "backgroundColor": "transparent",
                            "color": "semantic.text.primary",
                        },
                    },
                    "sizes": {"sm": {"padding": "spacing.2"}, "md": {"padding": "spacing.4"}},
                    "states": {"disabled": {"opacity": "0.5"}},
                }
            }
        },
    }


@pytest.fixture
def token_config(token_document: dict[str, Any]) -> TokenConfig:
    """Return the validated fixture config."""
    return parse_tokenspec(token_document)


@pytest.fixture
def config_file(tmp_path: Path, token_document: dict[str, Any]) -> Path:
    """Write the fixture document to tmp_path/tokencraft.yaml."""
    path = tmp_path / "tokencraft.yaml"
    path.write_text(yaml.safe_dump(token_document, sort_keys=False), encoding="utf-8")
    return path
