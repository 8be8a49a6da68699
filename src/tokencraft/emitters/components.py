"""
Component library and theme-mode stylesheet emitters.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tokencraft.core.ir.styles import parse_style_object
from tokencraft.core.ir.tokenspec import TokenConfig
from tokencraft.core.modes import theme_modes_css
from tokencraft.core.resolver import ResolutionPolicy, ResolvedTheme, TokenResolver
from tokencraft.core.style_compiler import compile_entries, render_rule

from .base import GENERATED_NOTICE, Emitter

logger = logging.getLogger(__name__)


class ComponentCssEmitter(Emitter):
    """Compiled component library as CSS classes for one mode.

    ``button`` renders ``.button`` from its base style, then
    ``.button-<name>`` for every declared variant, size and state.
    """

    format = "components"
    extension = "css"
    stem = "components"
    per_mode = True

    def emit(
        self,
        themes: Sequence[ResolvedTheme],
        config: TokenConfig,
        policy: ResolutionPolicy = ResolutionPolicy.STRICT,
    ) -> str:
        (theme,) = themes
        resolver = TokenResolver(config, theme.mode, policy)

        title = config.name or "tokencraft"
        blocks = [f"/* {title} components: {theme.mode} */\n/* {GENERATED_NOTICE} */"]
        if not config.components.library:
            logger.debug("Component library is empty")

        for name, definition in config.components.library.items():
            styles = [(f".{name}", definition.base)]
            for section in (definition.variants, definition.sizes, definition.states):
                styles.extend((f".{name}-{key}", style) for key, style in section.items())

            for selector, style in styles:
                rule = compile_entries(parse_style_object(style), resolver)
                rendered = render_rule(selector, rule)
                if rendered:
                    blocks.append(rendered)

        return "\n\n".join(blocks) + "\n"


class ThemeModesEmitter(Emitter):
    """Runtime mode-switching stylesheet from the theme-mode registry."""

    format = "modes"
    extension = "css"
    stem = "theme-modes"
    uses_themes = False

    def emit(
        self,
        themes: Sequence[ResolvedTheme],
        config: TokenConfig,
        policy: ResolutionPolicy = ResolutionPolicy.STRICT,
    ) -> str:
        return f"/* {GENERATED_NOTICE} */\n\n" + theme_modes_css()
