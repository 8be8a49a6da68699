"""
CSS and SCSS emitters.

Generates one stylesheet per theme mode. Variable names are the
dash-joined reference path, so ``semantic.text.primary`` becomes
``--<prefix>-semantic-text-primary`` and matches the lenient resolver's
``var(...)`` fallbacks.
"""

from __future__ import annotations

from collections.abc import Sequence

from tokencraft.core.ir.tokenspec import TokenConfig
from tokencraft.core.resolver import ResolutionPolicy, ResolvedTheme

from .base import GENERATED_NOTICE, Emitter, token_entries, variable_name


def _header(config: TokenConfig, theme: ResolvedTheme) -> str:
    title = config.name or "tokencraft"
    return f"{title} tokens: {theme.mode}"


class CssEmitter(Emitter):
    """``:root`` block of custom properties for one mode."""

    format = "css"
    extension = "css"
    per_mode = True

    def emit(
        self,
        themes: Sequence[ResolvedTheme],
        config: TokenConfig,
        policy: ResolutionPolicy = ResolutionPolicy.STRICT,
    ) -> str:
        (theme,) = themes
        prefix = config.prefix
        lines: list[str] = []

        # Header comment
        lines.append(f"/* {_header(config, theme)} */")
        lines.append(f"/* {GENERATED_NOTICE} */")
        lines.append("")

        lines.append(":root {")
        for path, value in token_entries(theme, config):
            lines.append(f"  --{prefix}-{variable_name(path)}: {value};")
        lines.append("}")

        return "\n".join(lines) + "\n"


class ScssEmitter(Emitter):
    """SCSS variables for one mode."""

    format = "scss"
    extension = "scss"
    per_mode = True

    def emit(
        self,
        themes: Sequence[ResolvedTheme],
        config: TokenConfig,
        policy: ResolutionPolicy = ResolutionPolicy.STRICT,
    ) -> str:
        (theme,) = themes
        prefix = config.prefix
        lines = [
            f"// {_header(config, theme)}",
            f"// {GENERATED_NOTICE}",
            "",
        ]
        for path, value in token_entries(theme, config):
            lines.append(f"${prefix}-{variable_name(path)}: {value};")

        return "\n".join(lines) + "\n"
