"""Tests for structural validation of token configs."""

from __future__ import annotations

import pytest


class TestValidateTokenSpec:
    """validate_tokenspec collects every issue in one pass."""

    def test_valid_document(self, token_document):
        from tokencraft.core.validator import validate_tokenspec

        result = validate_tokenspec(token_document)
        assert result.is_valid, result.errors
        assert result.config is not None
        assert result.config.mode_names == ["light", "dark"]

    def test_not_an_object(self):
        from tokencraft.core.validator import validate_tokenspec

        result = validate_tokenspec(["not", "a", "config"])
        assert not result.is_valid
        assert result.config is None

    def test_all_missing_sections_reported_together(self, token_document):
        from tokencraft.core.validator import validate_tokenspec

        del token_document["version"]
        del token_document["tokens"]
        result = validate_tokenspec(token_document)

        assert not result.is_valid
        assert "version is required" in result.errors
        assert "tokens configuration is required" in result.errors

    def test_missing_theme_section(self, token_document):
        from tokencraft.core.validator import validate_tokenspec

        del token_document["theme"]
        result = validate_tokenspec(token_document)
        assert "theme configuration is required" in result.errors

    def test_incomplete_color_scale(self, token_document):
        from tokencraft.core.validator import validate_tokenspec

        del token_document["theme"]["themes"]["dark"]["colors"]["gray"]["950"]
        result = validate_tokenspec(token_document)

        assert not result.is_valid
        assert any('"gray" is missing steps 950' in e for e in result.errors)

    def test_unknown_scale_step(self, token_document):
        from tokencraft.core.validator import validate_tokenspec

        token_document["theme"]["themes"]["light"]["colors"]["gray"]["975"] = "#000000"
        result = validate_tokenspec(token_document)
        assert any("unknown steps 975" in e for e in result.errors)

    def test_theme_shape_mismatch(self, token_document):
        from tokencraft.core.validator import validate_tokenspec

        del token_document["theme"]["themes"]["dark"]["semantic"]["interactive"]
        result = validate_tokenspec(token_document)
        assert any(
            'theme "dark" is missing semantic.interactive' in e for e in result.errors
        )

    def test_role_mismatch(self, token_document):
        from tokencraft.core.validator import validate_tokenspec

        token_document["theme"]["themes"]["dark"]["semantic"]["text"]["muted"] = "#888888"
        result = validate_tokenspec(token_document)
        assert any("semantic.text keys differ" in e and "muted" in e for e in result.errors)

    def test_theme_missing_semantic(self, token_document):
        from tokencraft.core.validator import validate_tokenspec

        del token_document["theme"]["themes"]["dark"]["semantic"]
        result = validate_tokenspec(token_document)
        assert 'theme "dark" is missing semantic' in result.errors

    def test_default_must_be_declared(self, token_document):
        from tokencraft.core.validator import validate_tokenspec

        token_document["theme"]["default"] = "midnight"
        result = validate_tokenspec(token_document)
        assert any(e.startswith("theme.default must be one of") for e in result.errors)

    def test_empty_prefix(self, token_document):
        from tokencraft.core.validator import validate_tokenspec

        token_document["tokens"]["prefix"] = ""
        result = validate_tokenspec(token_document)
        assert "tokens.prefix is required" in result.errors

    def test_unknown_format_is_a_warning(self, token_document):
        from tokencraft.core.validator import validate_tokenspec

        token_document["tokens"]["formats"] = ["css", "pdf"]
        result = validate_tokenspec(token_document)
        assert result.is_valid
        assert result.warnings == ["tokens.formats: 'pdf' is not a supported format"]

    def test_type_errors_from_models(self, token_document):
        from tokencraft.core.validator import validate_tokenspec

        token_document["spacing"]["scale"] = "1rem"
        result = validate_tokenspec(token_document)
        assert not result.is_valid
        assert any(e.startswith("spacing.scale") for e in result.errors)

    def test_integer_scale_keys(self, token_document):
        """YAML reads unquoted scale steps as integers."""
        from tokencraft.core.validator import validate_tokenspec

        gray = token_document["theme"]["themes"]["light"]["colors"]["gray"]
        token_document["theme"]["themes"]["light"]["colors"]["gray"] = {
            int(step): value for step, value in gray.items()
        }
        result = validate_tokenspec(token_document)
        assert result.is_valid, result.errors
        assert result.config.theme_for("light").colors["gray"]["50"] == "#f9fafb"


class TestParseTokenSpec:
    def test_raises_with_every_issue(self, token_document):
        from tokencraft.core.errors import ConfigValidationError
        from tokencraft.core.validator import parse_tokenspec

        del token_document["version"]
        token_document["theme"]["default"] = "sepia"

        with pytest.raises(ConfigValidationError) as exc_info:
            parse_tokenspec(token_document)
        assert len(exc_info.value.errors) >= 2
        assert "version is required" in str(exc_info.value)

    def test_models_are_frozen(self, token_config):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            token_config.tokens.prefix = "x"  # type: ignore[misc]

    def test_camel_case_aliases(self, token_config):
        assert token_config.typography.font_size["lg"] == "1.125rem"
        assert token_config.effects.border_radius["md"] == "0.375rem"
        assert token_config.responsive.container_sizes == {"sm": "640px"}
        document = token_config.to_document()
        assert "fontSize" in document["typography"]
        assert "containerSizes" in document["responsive"]

    def test_theme_for_unknown_mode(self, token_config):
        from tokencraft.core.errors import UnknownModeError

        with pytest.raises(UnknownModeError, match="sepia"):
            token_config.theme_for("sepia")
