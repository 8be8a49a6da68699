"""
Theme mode registry.

Fixed catalog of concrete modes with their CSS class, base color roles and
effect flags. The pseudo-mode ``system`` is never stored here; turning it
into a concrete mode is the job of an environment detector (see
mode_switch.EnvironmentDetector).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .errors import UnknownModeError

SYSTEM_MODE = "system"

# Class present on the root element while a mode switch animates
TRANSITION_CLASS = "theme-transitioning"

EFFECT_NAMES: tuple[str, ...] = ("glass", "glow", "floatingOrbs", "gridPattern")


@dataclass(frozen=True)
class ThemeModeConfig:
    """A concrete theme mode."""

    name: str
    label: str
    description: str
    css_class: str
    color_roles: Mapping[str, str] = field(default_factory=dict)
    effect_flags: Mapping[str, bool] = field(default_factory=dict)

    def supports(self, effect: str) -> bool:
        return bool(self.effect_flags.get(effect, False))


def _mode(
    name: str,
    label: str,
    description: str,
    color_roles: dict[str, str],
    effects: dict[str, bool],
) -> ThemeModeConfig:
    return ThemeModeConfig(
        name=name,
        label=label,
        description=description,
        css_class=name,
        color_roles=MappingProxyType(color_roles),
        effect_flags=MappingProxyType(effects),
    )


DEFAULT_THEME_MODES: tuple[ThemeModeConfig, ...] = (
    _mode(
        "light",
        "Light Mode",
        "Clean and bright interface for daytime use",
        {
            "background": "hsl(0, 0%, 100%)",
            "foreground": "hsl(222.2, 84%, 4.9%)",
            "primary": "hsl(221.2, 83.2%, 53.3%)",
            "secondary": "hsl(210, 40%, 96%)",
            "accent": "hsl(210, 40%, 96%)",
            "muted": "hsl(215.4, 16.3%, 46.9%)",
            "border": "hsl(214.3, 31.8%, 91.4%)",
        },
        {"glass": False, "glow": False, "floatingOrbs": False, "gridPattern": True},
    ),
    _mode(
        "dark",
        "Dark Mode",
        "Reduced luminance for low-light environments",
        {
            "background": "hsl(222.2, 84%, 4.9%)",
            "foreground": "hsl(210, 40%, 98%)",
            "primary": "hsl(217.2, 91.2%, 59.8%)",
            "secondary": "hsl(217.2, 32.6%, 17.5%)",
            "accent": "hsl(217.2, 32.6%, 17.5%)",
            "muted": "hsl(215, 20.2%, 65.1%)",
            "border": "hsl(217.2, 32.6%, 17.5%)",
        },
        {"glass": True, "glow": False, "floatingOrbs": False, "gridPattern": True},
    ),
    _mode(
        "midnight",
        "Midnight Mode",
        "Elevated dark mode: deep black with vivid accents",
        {
            "background": "hsl(0, 0%, 3%)",
            "foreground": "hsl(210, 40%, 98%)",
            "primary": "hsl(217.2, 91.2%, 59.8%)",
            "secondary": "hsl(217.2, 32.6%, 17.5%)",
            "accent": "hsl(217.2, 32.6%, 17.5%)",
            "muted": "hsl(215, 20.2%, 65.1%)",
            "border": "hsl(217.2, 32.6%, 17.5%)",
        },
        {"glass": True, "glow": True, "floatingOrbs": True, "gridPattern": True},
    ),
)


class ThemeModeRegistry:
    """Lookup over a fixed set of concrete theme modes."""

    def __init__(self, modes: tuple[ThemeModeConfig, ...] = DEFAULT_THEME_MODES):
        self._modes: dict[str, ThemeModeConfig] = {mode.name: mode for mode in modes}

    @property
    def names(self) -> list[str]:
        return list(self._modes)

    def get(self, name: str) -> ThemeModeConfig:
        """Get a concrete mode.

        Raises:
            UnknownModeError: For unknown names, including ``system``.
        """
        mode = self._modes.get(name)
        if mode is None:
            hint = "resolve it through an environment detector first" if name == SYSTEM_MODE else ""
            raise UnknownModeError(name, self.names, hint=hint)
        return mode

    def all_modes(self) -> list[ThemeModeConfig]:
        return list(self._modes.values())

    def supports_effect(self, name: str, effect: str) -> bool:
        return self.get(name).supports(effect)

    def class_name_for(self, name: str) -> str:
        return self.get(name).css_class

    def effect_flags(self, name: str) -> dict[str, bool]:
        return dict(self.get(name).effect_flags)

    def __contains__(self, name: object) -> bool:
        return name in self._modes


default_registry = ThemeModeRegistry()


def get_theme_mode(name: str) -> ThemeModeConfig:
    return default_registry.get(name)


def supports_effect(name: str, effect: str) -> bool:
    return default_registry.supports_effect(name, effect)


def all_theme_modes() -> list[ThemeModeConfig]:
    return default_registry.all_modes()


def class_name_for(name: str) -> str:
    return default_registry.class_name_for(name)


def effect_flags(name: str) -> dict[str, bool]:
    return default_registry.effect_flags(name)


# =============================================================================
# CSS
# =============================================================================

# Effect rules emitted per mode when the mode's flag is set
_EFFECT_RULES: dict[str, tuple[str, list[str]]] = {
    "glass": (
        ".glass",
        [
            "backdrop-filter: blur(8px)",
            "-webkit-backdrop-filter: blur(8px)",
            "background: color-mix(in srgb, var(--background) 80%, transparent)",
            "border: 1px solid color-mix(in srgb, var(--border) 20%, transparent)",
        ],
    ),
    "glow": (
        ".glow-effect",
        [
            "box-shadow: 0 0 20px color-mix(in srgb, var(--primary) 30%, transparent), "
            "0 0 40px color-mix(in srgb, var(--primary) 10%, transparent)",
        ],
    ),
    "floatingOrbs": (
        ".floating-orb",
        ["opacity: 1"],
    ),
    "gridPattern": (
        ".grid-pattern",
        [
            "background-size: 50px 50px",
            "background-image: "
            "linear-gradient("
            "color-mix(in srgb, var(--primary) 8%, transparent) 1px, transparent 1px), "
            "linear-gradient(90deg, "
            "color-mix(in srgb, var(--primary) 8%, transparent) 1px, transparent 1px)",
        ],
    ),
}

_TRANSITION_PROPERTIES = (
    "background-color",
    "border-color",
    "color",
    "fill",
    "stroke",
    "box-shadow",
)


def generate_theme_mode_css(mode: ThemeModeConfig) -> str:
    """Color-role custom properties for one mode's class."""
    lines = [f".{mode.css_class} {{"]
    for role, value in mode.color_roles.items():
        lines.append(f"  --{role}: {value};")
    lines.append("}")
    return "\n".join(lines)


def theme_modes_css(registry: ThemeModeRegistry | None = None, transition_ms: int = 300) -> str:
    """Complete stylesheet for runtime mode switching.

    One class block per mode, effect rules gated by each mode's effect
    flags, and the transition rule applied while switching.
    """
    registry = registry or default_registry
    modes = registry.all_modes()
    blocks = [generate_theme_mode_css(mode) for mode in modes]

    transitions = ",\n    ".join(
        f"{prop} {transition_ms}ms ease-in-out" for prop in _TRANSITION_PROPERTIES
    )
    blocks.append(
        f".{TRANSITION_CLASS},\n"
        f".{TRANSITION_CLASS} *,\n"
        f".{TRANSITION_CLASS} *::before,\n"
        f".{TRANSITION_CLASS} *::after {{\n"
        f"  transition:\n    {transitions} !important;\n"
        "}"
    )

    for effect in EFFECT_NAMES:
        selector, declarations = _EFFECT_RULES[effect]
        for mode in modes:
            if not mode.supports(effect):
                continue
            body = "\n".join(f"  {decl};" for decl in declarations)
            blocks.append(f".{mode.css_class} {selector} {{\n{body}\n}}")

    return "\n\n".join(blocks) + "\n"
