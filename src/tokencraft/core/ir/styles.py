"""
Component style IR.

A component style definition maps variant, size and state names to style
objects (property -> value). Values are parsed into a closed set of nodes
before compilation:

- LiteralValue: passed through unchanged
- TokenReference: dotted path resolved through the token resolver
- StateBlock: nested interaction-state object (hover/focus/active)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# Interaction-state keys and the nested selector suffix they compile to
INTERACTION_STATES: dict[str, str] = {
    "hover": "&:hover",
    "focus": "&:focus",
    "active": "&:active",
}

# Dotted identifier path: at least one dot, no whitespace, first segment
# starts with a letter so "0.5rem" and "rgba(0,0,0,0.5)" stay literals.
_REFERENCE_RE = re.compile(r"^[A-Za-z_][\w-]*(?:\.[\w-]+)+$")


def is_reference(value: Any) -> bool:
    """Check whether a style value is a token reference."""
    return isinstance(value, str) and bool(_REFERENCE_RE.match(value))


# =============================================================================
# Nodes
# =============================================================================


@dataclass(frozen=True)
class LiteralValue:
    value: str


@dataclass(frozen=True)
class TokenReference:
    path: str


@dataclass(frozen=True)
class StateBlock:
    state: str
    entries: tuple[StyleEntry, ...]

    @property
    def selector(self) -> str:
        return INTERACTION_STATES[self.state]


StyleNode = LiteralValue | TokenReference | StateBlock


@dataclass(frozen=True)
class StyleEntry:
    property: str
    node: StyleNode


def parse_style_object(raw: Mapping[str, Any]) -> tuple[StyleEntry, ...]:
    """Parse a raw style object into IR entries.

    Nested objects under unrecognized keys and non-scalar values are
    dropped with a warning rather than flattened into the base rule.
    """
    entries: list[StyleEntry] = []
    for prop, value in raw.items():
        if isinstance(value, Mapping):
            if prop in INTERACTION_STATES:
                entries.append(StyleEntry(prop, StateBlock(prop, parse_style_object(value))))
            else:
                logger.warning(f"Ignoring nested style object under unrecognized key '{prop}'")
            continue

        if is_reference(value):
            entries.append(StyleEntry(prop, TokenReference(value)))
        elif isinstance(value, bool):
            entries.append(StyleEntry(prop, LiteralValue(str(value).lower())))
        elif isinstance(value, (str, int, float)):
            entries.append(StyleEntry(prop, LiteralValue(str(value))))
        else:
            logger.warning(f"Ignoring non-scalar style value for '{prop}': {value!r}")

    return tuple(entries)


# =============================================================================
# Compiled output
# =============================================================================


@dataclass
class CompiledRule:
    """Flat property map plus nested rules keyed by selector suffix."""

    properties: dict[str, str] = field(default_factory=dict)
    nested: dict[str, CompiledRule] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.properties and all(rule.is_empty for rule in self.nested.values())

    def to_dict(self) -> dict[str, Any]:
        """CSS-in-JS object shape: properties first, then nested selectors."""
        data: dict[str, Any] = dict(self.properties)
        for selector, rule in self.nested.items():
            data[selector] = rule.to_dict()
        return data


# =============================================================================
# Component definition
# =============================================================================


class ComponentStyleDefinition(BaseModel):
    """Base style, variants, sizes and states of one component.

    Lookups for names that are not declared fall back to the section's
    ``default`` entry, then to an empty style object. A missing variant
    degrades to unstyled output instead of failing composition.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    base: dict[str, Any] = Field(default_factory=dict)
    variants: dict[str, dict[str, Any]] = Field(default_factory=dict)
    sizes: dict[str, dict[str, Any]] = Field(default_factory=dict)
    states: dict[str, dict[str, Any]] = Field(default_factory=dict)

    def variant(self, name: str | None) -> dict[str, Any]:
        return _select(self.variants, name)

    def size(self, name: str | None) -> dict[str, Any]:
        return _select(self.sizes, name)

    def state(self, name: str | None) -> dict[str, Any]:
        return _select(self.states, name)


def _select(section: Mapping[str, dict[str, Any]], name: str | None) -> dict[str, Any]:
    if name is not None and name in section:
        return section[name]
    if "default" in section:
        if name is not None:
            logger.debug(f"Style '{name}' not declared, using 'default'")
        return section["default"]
    return {}
