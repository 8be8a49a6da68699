"""
Tailwind theme-extension emitter.

Mode independent: color scales are merged across themes with the default
theme winning, and semantic colors go through CSS custom properties so
class-based mode switching keeps working.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from tokencraft.core.ir.tokenspec import TokenConfig
from tokencraft.core.merge import deep_merge
from tokencraft.core.resolver import ResolutionPolicy, ResolvedTheme, css_variable_name

from .base import GENERATED_NOTICE, Emitter, ordered_like, selected_namespaces

DEFAULT_CONTENT_GLOBS = [
    "./src/**/*.{js,ts,jsx,tsx,mdx}",
    "./components/**/*.{js,ts,jsx,tsx,mdx}",
    "./app/**/*.{js,ts,jsx,tsx,mdx}",
]


def build_colors(config: TokenConfig) -> dict[str, Any]:
    """Merged color scales plus semantic colors as custom-property references."""
    selected = selected_namespaces(config)
    default = config.default_mode
    reference = config.theme.themes.get(default)

    colors: dict[str, Any] = {}
    if "colors" in selected:
        ordered = [mode for mode in config.mode_names if mode != default]
        if reference is not None:
            ordered.append(default)
        for mode in ordered:
            colors = deep_merge(colors, config.theme_for(mode).colors)
        if reference is not None:
            colors = ordered_like(colors, reference.colors)

    if "semantic" in selected and reference is not None:
        colors["semantic"] = {
            category: {
                role: f"var({css_variable_name(config.prefix, f'semantic.{category}.{role}')})"
                for role in roles
            }
            for category, roles in reference.semantic.items()
        }
    return colors


def build_font_sizes(config: TokenConfig) -> dict[str, Any]:
    typography = config.typography
    sizes: dict[str, Any] = {}
    for key, size in typography.font_size.items():
        line_height = typography.line_height.get(key)
        if line_height is not None:
            sizes[key] = [size, {"lineHeight": str(line_height)}]
        else:
            sizes[key] = size

    for category, scales in typography.scales.items():
        for key, scale in scales.items():
            extras = scale.model_dump(
                mode="json", by_alias=True, exclude_none=True, exclude={"font_size"}
            )
            sizes[f"{category}-{key}"] = [scale.font_size, extras]
    return sizes


def build_spacing(config: TokenConfig) -> dict[str, str]:
    spacing = dict(config.spacing.scale)
    for category, values in config.spacing.semantic.items():
        for key, value in values.items():
            spacing[f"{category}-{key}"] = value
    return spacing


def build_theme_extension(config: TokenConfig) -> dict[str, Any]:
    """The ``theme.extend`` object of a Tailwind config.

    Token sections follow the canonical namespace order and honor
    ``tokens.include`` / ``tokens.exclude``. Font families, weights,
    line heights, letter spacing, screens and container settings
    follow them.
    """
    typography = config.typography
    effects = config.effects
    responsive = config.responsive
    selected = selected_namespaces(config)

    extension: dict[str, Any] = {}
    if "colors" in selected or "semantic" in selected:
        extension["colors"] = build_colors(config)
    if "spacing" in selected:
        extension["spacing"] = build_spacing(config)
    if "typography.fontSize" in selected:
        extension["fontSize"] = build_font_sizes(config)

    effect_sections = {
        "shadows": ("boxShadow", lambda: dict(effects.shadows)),
        "borderRadius": ("borderRadius", lambda: dict(effects.border_radius)),
        "gradients": ("backgroundImage", lambda: _flat_gradients(effects.gradients)),
        "blur": ("blur", lambda: dict(effects.blur)),
        "opacity": ("opacity", lambda: dict(effects.opacity)),
    }
    for namespace, (key, build) in effect_sections.items():
        if namespace in selected:
            extension[key] = build()

    extension.update(
        {
            "fontFamily": dict(typography.font_family),
            "fontWeight": dict(typography.font_weight),
            "lineHeight": dict(typography.line_height),
            "letterSpacing": dict(typography.letter_spacing),
            "screens": {name: bp.min for name, bp in responsive.breakpoints.items()},
            "container": {
                "center": True,
                "padding": "1rem",
                "screens": dict(responsive.container_sizes),
            },
        }
    )
    return extension


def _flat_gradients(gradients: dict[str, Any]) -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in gradients.items():
        if isinstance(value, dict):
            for name, gradient in value.items():
                flat[f"{key}-{name}"] = gradient
        else:
            flat[key] = value
    return flat


class TailwindEmitter(Emitter):
    """``tailwind.config.js`` with the token theme extension."""

    format = "tailwind"
    extension = "js"
    stem = "tailwind.config"
    uses_themes = False

    def emit(
        self,
        themes: Sequence[ResolvedTheme],
        config: TokenConfig,
        policy: ResolutionPolicy = ResolutionPolicy.STRICT,
    ) -> str:
        extension = json.dumps(build_theme_extension(config), indent=2, ensure_ascii=False)
        content = json.dumps(DEFAULT_CONTENT_GLOBS, indent=2).replace("\n", "\n  ")
        extend = extension.replace("\n", "\n    ")
        return (
            "/** @type {import('tailwindcss').Config} */\n"
            f"// {GENERATED_NOTICE}\n"
            "\n"
            "module.exports = {\n"
            f"  content: {content},\n"
            '  darkMode: "class",\n'
            "  theme: {\n"
            f"    extend: {extend},\n"
            "  },\n"
            "};\n"
        )
