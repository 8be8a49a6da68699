"""
Emitter base class and canonical token flattening.

Every emitter walks namespaces in the same fixed order so regenerating
the same input is byte-for-byte stable and per-mode artifacts can be
diffed line by line.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from tokencraft.core.ir.tokenspec import TokenConfig
from tokencraft.core.resolver import ResolutionPolicy, ResolvedTheme

# Canonical namespace order shared by all emitters
CANONICAL_NAMESPACES: tuple[str, ...] = (
    "colors",
    "semantic",
    "spacing",
    "typography.fontSize",
    "shadows",
    "borderRadius",
    "gradients",
    "blur",
    "opacity",
)

# Canonical namespace -> dotted reference prefix of its tokens
NAMESPACE_PATHS: dict[str, str] = {
    "colors": "colors",
    "semantic": "semantic",
    "spacing": "spacing",
    "typography.fontSize": "typography.fontSize",
    "shadows": "effects.shadows",
    "borderRadius": "effects.borderRadius",
    "gradients": "effects.gradients",
    "blur": "effects.blur",
    "opacity": "effects.opacity",
}

GENERATED_NOTICE = "Auto-generated by tokencraft - do not edit"


def flatten(path: str, value: Any) -> Iterator[tuple[str, str]]:
    """Yield ``(dotted_path, literal)`` pairs for every scalar leaf."""
    if isinstance(value, Mapping):
        for key, child in value.items():
            yield from flatten(f"{path}.{key}", child)
    elif isinstance(value, bool):
        yield path, str(value).lower()
    elif isinstance(value, (str, int, float)):
        yield path, str(value)


def selected_namespaces(config: TokenConfig) -> tuple[str, ...]:
    """Canonical namespaces filtered by ``tokens.include`` / ``tokens.exclude``."""
    include = set(config.tokens.include)
    exclude = set(config.tokens.exclude)
    return tuple(
        ns
        for ns in CANONICAL_NAMESPACES
        if (not include or ns in include) and ns not in exclude
    )


def _namespace_source(namespace: str, config: TokenConfig) -> Any:
    """Mode-independent namespace values."""
    if namespace == "spacing":
        return config.spacing.scale
    if namespace == "typography.fontSize":
        return config.typography.font_size
    return getattr(config.effects, EFFECT_ATTRS[namespace])


# Canonical effects namespace -> EffectsSpec attribute
EFFECT_ATTRS = {
    "shadows": "shadows",
    "borderRadius": "border_radius",
    "gradients": "gradients",
    "blur": "blur",
    "opacity": "opacity",
}


def ordered_like(value: Any, reference: Any) -> Any:
    """Copy ``value`` with mapping keys in ``reference``'s order.

    Keys the reference does not declare follow in their own order.
    """
    if not isinstance(value, Mapping):
        return value
    if not isinstance(reference, Mapping):
        reference = {}
    keys = [key for key in reference if key in value]
    keys.extend(key for key in value if key not in reference)
    return {key: ordered_like(value[key], reference.get(key)) for key in keys}


def theme_maps(theme: ResolvedTheme, config: TokenConfig) -> dict[str, Any]:
    """Selected theme namespaces of one mode, keyed in the default theme's order.

    Every mode therefore lists its colors and semantic roles in the same
    sequence.
    """
    reference = config.theme.themes.get(config.default_mode)
    selected = selected_namespaces(config)
    maps: dict[str, Any] = {}
    for namespace, value in (("colors", theme.colors), ("semantic", theme.semantic)):
        if namespace in selected:
            order = getattr(reference, namespace) if reference is not None else {}
            maps[namespace] = ordered_like(value, order)
    return maps


def token_entries(theme: ResolvedTheme, config: TokenConfig) -> list[tuple[str, str]]:
    """All tokens for one mode as ``(dotted_path, value)`` in canonical order."""
    themed = theme_maps(theme, config)
    entries: list[tuple[str, str]] = []
    for namespace in selected_namespaces(config):
        if namespace in themed:
            source = themed[namespace]
        else:
            source = _namespace_source(namespace, config)
        entries.extend(flatten(NAMESPACE_PATHS[namespace], source))
    return entries


def variable_name(path: str) -> str:
    """Dash-joined variable suffix for a dotted path."""
    return path.replace(".", "-")


class Emitter(ABC):
    """One output format.

    Attributes:
        format: Format name used on the command line.
        extension: File extension without the dot.
        stem: Default file stem.
        per_mode: True if one artifact is produced per theme mode.
        uses_themes: False if the artifact does not depend on resolved themes.
    """

    format: str = ""
    extension: str = ""
    stem: str = "tokens"
    per_mode: bool = False
    uses_themes: bool = True

    def filename(self, mode: str | None = None) -> str:
        if self.per_mode and mode:
            return f"{self.stem}-{mode}.{self.extension}"
        return f"{self.stem}.{self.extension}"

    @abstractmethod
    def emit(
        self,
        themes: Sequence[ResolvedTheme],
        config: TokenConfig,
        policy: ResolutionPolicy = ResolutionPolicy.STRICT,
    ) -> str:
        """Render an artifact.

        Args:
            themes: Resolved themes, one for per-mode emitters.
            config: Config snapshot.
            policy: Resolution policy for any references the emitter resolves.

        Returns:
            Artifact text.
        """
