"""
Data emitters: JSON, JavaScript and TypeScript modules.

All three share one document shape holding every selected mode:

    {themes: {<mode>: {colors, semantic}}, spacing, typography, effects,
     breakpoints}
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from tokencraft.core.ir.tokenspec import TokenConfig
from tokencraft.core.resolver import ResolutionPolicy, ResolvedTheme

from .base import EFFECT_ATTRS, GENERATED_NOTICE, Emitter, selected_namespaces, theme_maps


def token_document(themes: Sequence[ResolvedTheme], config: TokenConfig) -> dict[str, Any]:
    """Build the shared data document for the selected modes.

    Sections follow the canonical namespace order and honor
    ``tokens.include`` / ``tokens.exclude``. Breakpoints are always kept.
    """

    def dump(model: Any) -> dict[str, Any]:
        return model.model_dump(mode="json", by_alias=True, exclude_none=True)

    selected = selected_namespaces(config)
    document: dict[str, Any] = {
        "themes": {theme.mode: theme_maps(theme, config) for theme in themes},
    }
    if "spacing" in selected:
        document["spacing"] = dump(config.spacing)
    if "typography.fontSize" in selected:
        document["typography"] = dump(config.typography)

    all_effects = dump(config.effects)
    effects = {ns: all_effects[ns] for ns in selected if ns in EFFECT_ATTRS}
    if effects:
        document["effects"] = effects

    document["breakpoints"] = {
        name: dump(breakpoint) for name, breakpoint in config.responsive.breakpoints.items()
    }
    return document


def _json(data: Any, indent: int = 2) -> str:
    return json.dumps(data, indent=indent, ensure_ascii=False)


class JsonEmitter(Emitter):
    format = "json"
    extension = "json"

    def emit(
        self,
        themes: Sequence[ResolvedTheme],
        config: TokenConfig,
        policy: ResolutionPolicy = ResolutionPolicy.STRICT,
    ) -> str:
        return _json(token_document(themes, config)) + "\n"


class JsEmitter(Emitter):
    """ES module exporting the token document and a theme accessor."""

    format = "js"
    extension = "js"

    def emit(
        self,
        themes: Sequence[ResolvedTheme],
        config: TokenConfig,
        policy: ResolutionPolicy = ResolutionPolicy.STRICT,
    ) -> str:
        data = _json(token_document(themes, config))
        return (
            "// Generated design tokens\n"
            f"// {GENERATED_NOTICE}\n"
            "\n"
            f"export const tokens = {data};\n"
            "\n"
            "export function getTheme(name) {\n"
            "  return tokens.themes[name];\n"
            "}\n"
            "\n"
            "export default tokens;\n"
        )


_TS_INTERFACES = """\
export interface ThemeTokens {
  colors?: Record<string, string | Record<string, string>>;
  semantic?: Record<string, Record<string, string>>;
}

export interface DesignTokens {
  themes: Record<ThemeName, ThemeTokens>;
  spacing?: Record<string, Record<string, unknown>>;
  typography?: Record<string, Record<string, unknown>>;
  effects?: Record<string, Record<string, unknown>>;
  breakpoints: Record<string, { min: string; max?: string }>;
}
"""


class TsEmitter(Emitter):
    """TypeScript module with a ThemeName union and typed accessor."""

    format = "ts"
    extension = "ts"

    def emit(
        self,
        themes: Sequence[ResolvedTheme],
        config: TokenConfig,
        policy: ResolutionPolicy = ResolutionPolicy.STRICT,
    ) -> str:
        names = " | ".join(json.dumps(theme.mode) for theme in themes) or "never"
        data = _json(token_document(themes, config))
        return (
            "// Generated design tokens\n"
            f"// {GENERATED_NOTICE}\n"
            "\n"
            f"export type ThemeName = {names};\n"
            "\n"
            f"{_TS_INTERFACES}"
            "\n"
            f"export const tokens: DesignTokens = {data};\n"
            "\n"
            "export function getTheme(name: ThemeName): ThemeTokens {\n"
            "  return tokens.themes[name];\n"
            "}\n"
            "\n"
            "export default tokens;\n"
        )
