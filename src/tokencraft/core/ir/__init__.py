"""
tokencraft Internal Representation (IR).

Typed config models and the component style IR.
"""

from .styles import (
    INTERACTION_STATES,
    CompiledRule,
    ComponentStyleDefinition,
    LiteralValue,
    StateBlock,
    StyleEntry,
    StyleNode,
    TokenReference,
    is_reference,
    parse_style_object,
)
from .tokenspec import (
    COLOR_SCALE_STEPS,
    THEME_NAMESPACES,
    Breakpoint,
    ComponentsSpec,
    EffectsSpec,
    ResponsiveSpec,
    SpacingSpec,
    ThemeDefinition,
    ThemeSection,
    TokenConfig,
    TokensSpec,
    TokenValue,
    TypographyScaleEntry,
    TypographySpec,
)

__all__ = [
    # Config
    "COLOR_SCALE_STEPS",
    "THEME_NAMESPACES",
    "Breakpoint",
    "ComponentsSpec",
    "EffectsSpec",
    "ResponsiveSpec",
    "SpacingSpec",
    "ThemeDefinition",
    "ThemeSection",
    "TokenConfig",
    "TokensSpec",
    "TokenValue",
    "TypographyScaleEntry",
    "TypographySpec",
    # Styles
    "INTERACTION_STATES",
    "CompiledRule",
    "ComponentStyleDefinition",
    "LiteralValue",
    "StateBlock",
    "StyleEntry",
    "StyleNode",
    "TokenReference",
    "is_reference",
    "parse_style_object",
]
