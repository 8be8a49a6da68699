"""Tests for CLI commands."""

from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from tokencraft.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


def _write(path: Path, document) -> Path:
    path.write_text(yaml.safe_dump(document, sort_keys=False), encoding="utf-8")
    return path


class TestExportCommand:
    def test_export_to_directory(self, cli_runner, config_file, tmp_path):
        out = tmp_path / "out"
        out.mkdir()

        result = cli_runner.invoke(
            app, ["export", "css", "-o", str(out), "-c", str(config_file)]
        )

        assert result.exit_code == 0, result.output
        assert "tokens-light.css" in result.output
        assert (out / "tokens-light.css").exists()
        assert (out / "tokens-dark.css").exists()

    def test_single_mode_and_prefix(self, cli_runner, config_file, tmp_path):
        target = tmp_path / "dark.css"

        result = cli_runner.invoke(
            app,
            ["export", "css", "-m", "dark", "--prefix", "acme", "-o", str(target)]
            + ["-c", str(config_file)],
        )

        assert result.exit_code == 0, result.output
        assert "--acme-semantic-text-primary: #f9fafb;" in target.read_text(encoding="utf-8")

    def test_partial_failure_exits_nonzero(self, cli_runner, tmp_path, token_document):
        token_document["theme"]["themes"]["dark"]["semantic"]["text"]["primary"] = (
            "colors.gray.975"
        )
        config_file = _write(tmp_path / "tokencraft.yaml", token_document)

        result = cli_runner.invoke(
            app, ["export", "css", "-o", str(tmp_path), "-c", str(config_file)]
        )

        assert result.exit_code == 1
        assert "colors.gray.975" in result.output
        assert "1 of 2 export job(s) failed" in result.output
        assert (tmp_path / "tokens-light.css").exists()

    def test_lenient_policy(self, cli_runner, tmp_path, token_document):
        token_document["theme"]["themes"]["dark"]["semantic"]["text"]["primary"] = (
            "colors.gray.975"
        )
        config_file = _write(tmp_path / "tokencraft.yaml", token_document)

        result = cli_runner.invoke(
            app,
            ["export", "css", "-o", str(tmp_path), "--policy", "lenient", "-c", str(config_file)],
        )

        assert result.exit_code == 0, result.output
        dark = (tmp_path / "tokens-dark.css").read_text(encoding="utf-8")
        assert "var(--p-colors-gray-975)" in dark

    def test_unsupported_format(self, cli_runner, config_file):
        result = cli_runner.invoke(app, ["export", "pdf", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Unsupported format" in result.output

    def test_unknown_mode(self, cli_runner, config_file):
        result = cli_runner.invoke(app, ["export", "css", "-m", "sepia", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "sepia" in result.output

    def test_missing_config(self, cli_runner, tmp_path):
        result = cli_runner.invoke(
            app, ["export", "css", "-c", str(tmp_path / "missing.yaml")]
        )

        assert result.exit_code == 1
        assert "not found" in result.output


class TestValidateCommand:
    def test_valid(self, cli_runner, config_file):
        result = cli_runner.invoke(app, ["validate", "-c", str(config_file)])

        assert result.exit_code == 0, result.output
        assert "is valid (themes: light, dark)" in result.output

    def test_reports_every_issue(self, cli_runner, tmp_path):
        config_file = tmp_path / "tokencraft.yaml"
        config_file.write_text("name: broken\n", encoding="utf-8")

        result = cli_runner.invoke(app, ["validate", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "version is required" in result.output
        assert "tokens configuration is required" in result.output

    def test_valid_result_without_config_exits_nonzero(
        self, cli_runner, config_file, monkeypatch
    ):
        from tokencraft.cli import export as export_cli
        from tokencraft.core.validator import TokenSpecValidationResult

        monkeypatch.setattr(
            export_cli, "validate_tokenspec", lambda document: TokenSpecValidationResult()
        )
        result = cli_runner.invoke(app, ["validate", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "no configuration was produced" in result.output

    def test_shape_mismatch(self, cli_runner, tmp_path, token_document):
        del token_document["theme"]["themes"]["dark"]["semantic"]["text"]["inverse"]
        config_file = _write(tmp_path / "tokencraft.yaml", token_document)

        result = cli_runner.invoke(app, ["validate", "-c", str(config_file)])

        assert result.exit_code == 1
        assert 'theme "dark"' in result.output


class TestThemeCommands:
    def test_list_shows_config_themes(self, cli_runner, tmp_path, token_document):
        themes = token_document["theme"]["themes"]
        themes["sepia"] = {
            "colors": dict(themes["light"]["colors"]),
            "semantic": dict(themes["light"]["semantic"]),
        }
        config_file = _write(tmp_path / "tokencraft.yaml", token_document)

        result = cli_runner.invoke(app, ["theme", "list", "-c", str(config_file)])

        assert result.exit_code == 0, result.output
        assert "light (default)" in result.output
        assert "dark" in result.output
        assert "sepia" in result.output
        assert "midnight" not in result.output

    def test_extend_saves_new_theme(self, cli_runner, config_file):
        from tokencraft.core.resolver import resolve
        from tokencraft.core.tokenspec_loader import load_tokenspec

        result = cli_runner.invoke(
            app,
            ["theme", "extend", "light", "brand", "--set", "colors.primary.500=#e11d48"]
            + ["-c", str(config_file)],
        )

        assert result.exit_code == 0, result.output
        assert "Added theme 'brand'" in result.output
        config = load_tokenspec(config_file)
        assert config.mode_names == ["light", "dark", "brand"]
        assert resolve("colors.primary.500", config, "brand") == "#e11d48"

    def test_extend_unknown_base(self, cli_runner, config_file):
        result = cli_runner.invoke(
            app, ["theme", "extend", "sepia", "brand", "-c", str(config_file)]
        )

        assert result.exit_code == 1
        assert "sepia" in result.output

    def test_extend_bad_assignment(self, cli_runner, config_file):
        result = cli_runner.invoke(
            app, ["theme", "extend", "light", "brand", "--set", "nope", "-c", str(config_file)]
        )

        assert result.exit_code != 0

    def test_modes(self, cli_runner):
        result = cli_runner.invoke(app, ["modes"])

        assert result.exit_code == 0, result.output
        assert "midnight" in result.output
        assert "light" in result.output


class TestComponentCommand:
    def test_compiles_selection(self, cli_runner, config_file):
        result = cli_runner.invoke(
            app, ["component", "button", "--variant", "ghost", "-c", str(config_file)]
        )

        assert result.exit_code == 0, result.output
        assert ".button {" in result.output
        assert "background-color: transparent;" in result.output

    def test_unknown_component(self, cli_runner, config_file):
        result = cli_runner.invoke(app, ["component", "card", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Unknown component" in result.output


class TestVersion:
    def test_version_flag(self, cli_runner):
        result = cli_runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "tokencraft version" in result.output
