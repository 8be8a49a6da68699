"""Tests for deep merge and theme extension."""

from __future__ import annotations

import pytest

# =============================================================================
# deep_merge
# =============================================================================


class TestDeepMerge:
    def test_empty_override_is_identity(self):
        from tokencraft.core.merge import deep_merge

        base = {"a": {"b": 1}, "c": [1, 2]}
        assert deep_merge(base, {}) == base
        assert deep_merge({}, base) == base

    def test_nested_objects_merge_key_by_key(self):
        from tokencraft.core.merge import deep_merge

        merged = deep_merge({"a": {"b": 1, "c": 2}}, {"a": {"c": 3, "d": 4}})
        assert merged == {"a": {"b": 1, "c": 3, "d": 4}}

    def test_lists_replace(self):
        from tokencraft.core.merge import deep_merge

        assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}

    def test_scalar_replaces_object(self):
        from tokencraft.core.merge import deep_merge

        assert deep_merge({"a": {"b": 1}}, {"a": "flat"}) == {"a": "flat"}
        assert deep_merge({"a": "flat"}, {"a": {"b": 1}}) == {"a": {"b": 1}}

    def test_last_override_wins(self):
        from tokencraft.core.merge import deep_merge

        base = {"x": 0, "y": {"z": 0}}
        merged = deep_merge(deep_merge(base, {"x": 1, "y": {"z": 1}}), {"x": 2})
        assert merged == {"x": 2, "y": {"z": 1}}

    def test_inputs_not_mutated(self):
        from tokencraft.core.merge import deep_merge

        base = {"a": {"b": [1]}}
        override = {"a": {"c": {"d": 1}}}
        merged = deep_merge(base, override)

        merged["a"]["b"].append(2)
        merged["a"]["c"]["d"] = 99
        assert base == {"a": {"b": [1]}}
        assert override == {"a": {"c": {"d": 1}}}


# =============================================================================
# merge_tokenspec / extend_theme
# =============================================================================


class TestMergeTokenSpec:
    def test_override_prefix(self, token_config):
        from tokencraft.core.merge import merge_tokenspec

        merged = merge_tokenspec(token_config, {"tokens": {"prefix": "acme"}})
        assert merged.prefix == "acme"
        assert merged.tokens.formats == ["css"]
        assert token_config.prefix == "p"

    def test_empty_override_is_identity(self, token_config):
        from tokencraft.core.merge import merge_tokenspec

        assert merge_tokenspec(token_config, {}) == token_config

    def test_merge_with_config(self, token_config):
        from tokencraft.core.merge import merge_tokenspec

        assert merge_tokenspec(token_config, token_config) == token_config

    def test_invalid_result_raises(self, token_config):
        from tokencraft.core.errors import ConfigValidationError
        from tokencraft.core.merge import merge_tokenspec

        with pytest.raises(ConfigValidationError) as exc_info:
            merge_tokenspec(token_config, {"tokens": {"formats": "css"}})
        assert any(e.startswith("tokens.formats") for e in exc_info.value.errors)


class TestExtendTheme:
    def test_adds_theme(self, token_config):
        from tokencraft.core.merge import extend_theme
        from tokencraft.core.resolver import resolve

        extended = extend_theme(
            token_config, "light", "brand", {"colors": {"primary": {"500": "#e11d48"}}}
        )

        assert extended.mode_names == ["light", "dark", "brand"]
        assert resolve("colors.primary.500", extended, "brand") == "#e11d48"
        assert resolve("colors.primary.600", extended, "brand") == "#2563eb"
        assert resolve("colors.primary.500", extended, "light") == "#3b82f6"
        assert "brand" not in token_config.mode_names

    def test_without_overrides_copies_base(self, token_config):
        from tokencraft.core.merge import extend_theme

        extended = extend_theme(token_config, "dark", "dim")
        assert extended.theme_for("dim") == token_config.theme_for("dark")

    def test_unknown_base(self, token_config):
        from tokencraft.core.errors import UnknownModeError
        from tokencraft.core.merge import extend_theme

        with pytest.raises(UnknownModeError):
            extend_theme(token_config, "sepia", "brand")

    def test_shape_breaking_override_rejected(self, token_config):
        from tokencraft.core.errors import ConfigValidationError
        from tokencraft.core.merge import extend_theme

        with pytest.raises(ConfigValidationError) as exc_info:
            extend_theme(token_config, "light", "brand", {"colors": {"accent": "#ff00ff"}})
        assert any('theme "brand"' in e for e in exc_info.value.errors)
