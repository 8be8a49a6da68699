"""Tests for the theme mode registry and its stylesheet."""

from __future__ import annotations

import pytest


class TestThemeModeRegistry:
    def test_builtin_modes(self):
        from tokencraft.core.modes import default_registry

        assert default_registry.names == ["light", "dark", "midnight"]
        assert "dark" in default_registry
        assert "system" not in default_registry

    def test_get_mode(self):
        from tokencraft.core.modes import get_theme_mode

        midnight = get_theme_mode("midnight")
        assert midnight.label == "Midnight Mode"
        assert midnight.css_class == "midnight"
        assert midnight.color_roles["background"] == "hsl(0, 0%, 3%)"

    def test_system_is_not_concrete(self):
        from tokencraft.core.errors import UnknownModeError
        from tokencraft.core.modes import get_theme_mode

        with pytest.raises(UnknownModeError, match="environment detector"):
            get_theme_mode("system")

    def test_unknown_mode(self):
        from tokencraft.core.errors import UnknownModeError
        from tokencraft.core.modes import class_name_for

        with pytest.raises(UnknownModeError) as exc_info:
            class_name_for("sepia")
        assert exc_info.value.available == ["light", "dark", "midnight"]

    def test_effect_flags(self):
        from tokencraft.core.modes import effect_flags, supports_effect

        assert supports_effect("midnight", "glow") is True
        assert supports_effect("light", "glass") is False
        assert supports_effect("dark", "glass") is True
        assert supports_effect("dark", "sparkles") is False
        assert effect_flags("light") == {
            "glass": False,
            "glow": False,
            "floatingOrbs": False,
            "gridPattern": True,
        }

    def test_effect_flags_returns_copy(self):
        from tokencraft.core.modes import effect_flags, supports_effect

        flags = effect_flags("light")
        flags["glow"] = True
        assert supports_effect("light", "glow") is False

    def test_custom_registry(self):
        from tokencraft.core.modes import ThemeModeConfig, ThemeModeRegistry

        sepia = ThemeModeConfig(
            name="sepia", label="Sepia", description="Warm paper", css_class="theme-sepia"
        )
        registry = ThemeModeRegistry((sepia,))
        assert registry.class_name_for("sepia") == "theme-sepia"
        assert registry.all_modes() == [sepia]


class TestThemeModesCss:
    def test_mode_blocks(self):
        from tokencraft.core.modes import theme_modes_css

        css = theme_modes_css()
        assert ".light {\n  --background: hsl(0, 0%, 100%);" in css
        assert ".dark {" in css
        assert ".midnight {" in css

    def test_transition_rule(self):
        from tokencraft.core.modes import TRANSITION_CLASS, theme_modes_css

        css = theme_modes_css(transition_ms=150)
        assert f".{TRANSITION_CLASS} *::after" in css
        assert "background-color 150ms ease-in-out" in css

    def test_effects_gated_by_flags(self):
        from tokencraft.core.modes import theme_modes_css

        css = theme_modes_css()
        assert ".midnight .glow-effect {" in css
        assert ".light .glow-effect" not in css
        assert ".dark .glass {" in css
        assert ".light .glass" not in css
        assert ".light .grid-pattern {" in css

    def test_deterministic(self):
        from tokencraft.core.modes import theme_modes_css

        assert theme_modes_css() == theme_modes_css()
