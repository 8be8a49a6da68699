"""
Token reference resolver.

Resolves dotted references such as ``semantic.text.primary`` or
``spacing.4`` against a TokenConfig for one theme mode.

Namespaces:
- ``colors`` / ``semantic``: walked inside ``theme.themes[mode]``
- ``spacing``: walked inside ``spacing.scale``
- ``typography`` / ``effects``: walked inside the top-level section

Resolution is single-hop: a literal that itself looks like a reference is
returned as-is. The one indirection the data model defines, a semantic
role holding ``colors.<scale>.<step>``, is dereferenced within the same
theme; color scale values are terminal.

Two policies are selectable by the caller:
- strict: unresolved references raise ResolutionError
- lenient: unresolved references become ``var(--<prefix>-<path>)`` so the
  value can still be supplied through a CSS custom property at run time
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .errors import NonTerminalReferenceError, ResolutionError, UnknownModeError
from .ir.styles import is_reference
from .ir.tokenspec import THEME_NAMESPACES, TokenConfig

logger = logging.getLogger(__name__)


class ResolutionPolicy(StrEnum):
    """What to do with a reference that cannot be resolved."""

    STRICT = "strict"
    LENIENT = "lenient"


# Top-level namespace -> path into the config document
_TOP_LEVEL_NAMESPACES: dict[str, tuple[str, ...]] = {
    "spacing": ("spacing", "scale"),
    "typography": ("typography",),
    "effects": ("effects",),
}

RESOLVABLE_NAMESPACES: tuple[str, ...] = THEME_NAMESPACES + tuple(_TOP_LEVEL_NAMESPACES)


def css_variable_name(prefix: str, path: str) -> str:
    """Custom property name for a dotted token path."""
    return f"--{prefix}-{path.replace('.', '-')}"


def fallback_reference(prefix: str, path: str) -> str:
    """Runtime indirection used by the lenient policy."""
    return f"var({css_variable_name(prefix, path)})"


class TokenResolver:
    """Resolves references against one config snapshot and mode.

    The config document is materialized once per resolver, so reuse one
    instance when resolving many references for the same mode.
    """

    def __init__(
        self,
        config: TokenConfig,
        mode: str,
        policy: ResolutionPolicy | str = ResolutionPolicy.STRICT,
    ):
        if mode not in config.theme.themes:
            raise UnknownModeError(mode, config.mode_names)

        self.config = config
        self.mode = mode
        self.policy = ResolutionPolicy(policy)
        self.prefix = config.tokens.prefix

        document = config.to_document()
        self._theme: dict[str, Any] = document["theme"]["themes"][mode]
        self._document = document

    def resolve(self, path: str) -> str:
        """Resolve a reference under this resolver's policy."""
        try:
            return self.resolve_strict(path)
        except ResolutionError as e:
            if self.policy is ResolutionPolicy.STRICT:
                raise
            fallback = fallback_reference(self.prefix, path)
            logger.debug(
                f"Unresolved reference {path!r} in mode {self.mode!r} -> {fallback} ({e.message})"
            )
            return fallback

    def resolve_strict(self, path: str) -> str:
        """Resolve a reference, raising on any failure regardless of policy."""
        segments = path.split(".")
        namespace = segments[0]
        if any(not segment for segment in segments):
            raise ResolutionError(path, f'Malformed token reference "{path}"', mode=self.mode)

        root = self._namespace_root(path, namespace)
        node = self._walk(path, namespace, root, segments[1:])
        value = self._terminal(path, namespace, node)

        if namespace == "semantic" and is_reference(value) and value.startswith("colors."):
            color = self._walk(value, "colors", self._theme.get("colors", {}), value.split(".")[1:])
            return self._terminal(value, "colors", color)

        return value

    def _namespace_root(self, path: str, namespace: str) -> Any:
        if namespace in THEME_NAMESPACES:
            return self._theme.get(namespace, {})

        keys = _TOP_LEVEL_NAMESPACES.get(namespace)
        if keys is None:
            raise ResolutionError(
                path,
                f'Token reference "{path}" uses unknown namespace "{namespace}"',
                namespace=namespace,
                mode=self.mode,
            )

        node: Any = self._document
        for key in keys:
            node = node.get(key, {}) if isinstance(node, Mapping) else {}
        return node

    def _walk(self, path: str, namespace: str, node: Any, segments: list[str]) -> Any:
        for segment in segments:
            if isinstance(node, Mapping) and segment in node:
                node = node[segment]
            else:
                raise ResolutionError(path, namespace=namespace, mode=self.mode)
        return node

    def _terminal(self, path: str, namespace: str, node: Any) -> str:
        if isinstance(node, Mapping):
            raise NonTerminalReferenceError(path, namespace=namespace, mode=self.mode)
        if isinstance(node, str):
            return node
        if isinstance(node, (int, float)) and not isinstance(node, bool):
            return str(node)
        raise ResolutionError(
            path,
            f'Token reference "{path}" does not resolve to a literal value',
            namespace=namespace,
            mode=self.mode,
        )


def resolve(
    path: str,
    config: TokenConfig,
    mode: str,
    policy: ResolutionPolicy | str = ResolutionPolicy.STRICT,
) -> str:
    """Resolve a single dotted reference.

    Args:
        path: Dotted reference, e.g. ``semantic.text.primary``.
        config: Config snapshot.
        mode: Theme mode declared in ``theme.themes``.
        policy: strict (raise) or lenient (synthesize a CSS variable).

    Returns:
        The stored literal, or the lenient fallback.

    Raises:
        UnknownModeError: If the mode is not declared (either policy).
        ResolutionError: Strict policy only.
    """
    return TokenResolver(config, mode, policy).resolve(path)


# =============================================================================
# Resolved themes
# =============================================================================


@dataclass(frozen=True)
class ResolvedTheme:
    """One mode's color namespaces with semantic references dereferenced."""

    mode: str
    colors: dict[str, Any]
    semantic: dict[str, dict[str, str]]

    def as_dict(self) -> dict[str, Any]:
        return {"colors": self.colors, "semantic": self.semantic}


def _resolve_role(resolver: TokenResolver, path: str) -> str:
    """Resolve a semantic role as the value of its own custom property.

    A lenient fallback on the role path would define the variable as
    ``var()`` of itself, so the fallback points at the failing target
    instead.
    """
    try:
        return resolver.resolve_strict(path)
    except ResolutionError as e:
        if resolver.policy is ResolutionPolicy.STRICT:
            raise
        fallback = fallback_reference(resolver.prefix, e.path)
        logger.debug(f"Semantic role {path!r} in mode {resolver.mode!r} -> {fallback}")
        return fallback


def resolve_theme(
    config: TokenConfig,
    mode: str,
    policy: ResolutionPolicy | str = ResolutionPolicy.STRICT,
) -> ResolvedTheme:
    """Resolve every semantic role of a mode to a concrete value.

    Raises:
        UnknownModeError: If the mode is not declared.
        ResolutionError: Strict policy, on the first bad semantic reference.
    """
    resolver = TokenResolver(config, mode, policy)
    theme = config.theme_for(mode)

    semantic: dict[str, dict[str, str]] = {}
    for category, roles in theme.semantic.items():
        semantic[category] = {
            role: _resolve_role(resolver, f"semantic.{category}.{role}") for role in roles
        }

    colors = {
        name: dict(value) if isinstance(value, Mapping) else value
        for name, value in theme.colors.items()
    }
    return ResolvedTheme(mode=mode, colors=colors, semantic=semantic)
