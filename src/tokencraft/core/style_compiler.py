"""
Component style compiler.

Expands abstract style objects (token references plus nested
hover/focus/active blocks) into CompiledRules and renders them as CSS.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from .ir.styles import (
    CompiledRule,
    ComponentStyleDefinition,
    LiteralValue,
    StateBlock,
    StyleEntry,
    TokenReference,
    parse_style_object,
)
from .ir.tokenspec import TokenConfig
from .merge import deep_merge
from .resolver import ResolutionPolicy, TokenResolver

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def compile_entries(entries: tuple[StyleEntry, ...], resolver: TokenResolver) -> CompiledRule:
    """Compile parsed style entries with an existing resolver."""
    rule = CompiledRule()
    for entry in entries:
        node = entry.node
        if isinstance(node, StateBlock):
            nested = compile_entries(node.entries, resolver)
            existing = rule.nested.get(node.selector)
            if existing is not None:
                existing.properties.update(nested.properties)
                existing.nested.update(nested.nested)
            else:
                rule.nested[node.selector] = nested
        elif isinstance(node, TokenReference):
            rule.properties[entry.property] = resolver.resolve(node.path)
        elif isinstance(node, LiteralValue):
            rule.properties[entry.property] = node.value
    return rule


def compile_style(
    style_object: Mapping[str, Any],
    config: TokenConfig,
    mode: str,
    policy: ResolutionPolicy | str = ResolutionPolicy.STRICT,
) -> CompiledRule:
    """Compile one style object for a theme mode.

    Args:
        style_object: property -> literal | dotted reference | state block.
        config: Config snapshot used for resolution.
        mode: Theme mode to resolve theme namespaces against.
        policy: strict (raise on bad references) or lenient (CSS variable).

    Returns:
        CompiledRule with base properties and ``&:<state>`` nested rules.

    Raises:
        UnknownModeError: If the mode is not declared.
        ResolutionError: Strict policy only.
    """
    resolver = TokenResolver(config, mode, policy)
    return compile_entries(parse_style_object(style_object), resolver)


def compose_component(
    definition: ComponentStyleDefinition,
    *,
    variant: str | None = None,
    size: str | None = None,
    state: str | None = None,
) -> dict[str, Any]:
    """Merge the base style with the selected variant, size and state.

    Later selections override earlier ones. Missing names degrade to the
    section's ``default`` entry or to nothing.
    """
    composed: dict[str, Any] = dict(definition.base)
    for style in (definition.variant(variant), definition.size(size), definition.state(state)):
        composed = deep_merge(composed, style)
    return composed


def compile_component(
    definition: ComponentStyleDefinition,
    config: TokenConfig,
    mode: str,
    policy: ResolutionPolicy | str = ResolutionPolicy.STRICT,
    *,
    variant: str | None = None,
    size: str | None = None,
    state: str | None = None,
) -> CompiledRule:
    """Compile a component selection (variant x size x state)."""
    composed = compose_component(definition, variant=variant, size=size, state=state)
    return compile_style(composed, config, mode, policy)


# =============================================================================
# CSS rendering
# =============================================================================


def css_property_name(name: str) -> str:
    """Convert a camelCase style property to its CSS name."""
    if name.startswith("--") or "-" in name:
        return name
    kebab = _CAMEL_BOUNDARY.sub("-", name).lower()
    # WebkitBackdropFilter -> -webkit-backdrop-filter
    if kebab.startswith(("webkit-", "moz-", "ms-")) and name[0].isupper():
        kebab = f"-{kebab}"
    return kebab


def render_rule(selector: str, rule: CompiledRule, indent: int = 0) -> str:
    """Render a CompiledRule as CSS.

    Nested selectors replace ``&`` with the parent selector, so
    ``.btn`` + ``&:hover`` renders as ``.btn:hover``. Empty rules render
    nothing.
    """
    prefix = " " * indent
    blocks: list[str] = []

    if rule.properties:
        lines = [f"{prefix}{selector} {{"]
        for name, value in rule.properties.items():
            lines.append(f"{prefix}  {css_property_name(name)}: {value};")
        lines.append(f"{prefix}}}")
        blocks.append("\n".join(lines))

    for suffix, nested in rule.nested.items():
        nested_selector = suffix.replace("&", selector)
        rendered = render_rule(nested_selector, nested, indent)
        if rendered:
            blocks.append(rendered)

    return "\n\n".join(blocks)
