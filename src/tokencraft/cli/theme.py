"""
Theme commands: list and extend the themes declared in the config, and
show the built-in theme-mode registry.
"""

from pathlib import Path

import typer

from tokencraft.cli.common import CONFIG_HELP, load_config_or_exit, parse_assignments
from tokencraft.cli_ui import display_table, print_error, print_info, print_success
from tokencraft.core.errors import ConfigValidationError, UnknownModeError
from tokencraft.core.merge import extend_theme
from tokencraft.core.modes import EFFECT_NAMES, all_theme_modes
from tokencraft.core.resolver import ResolutionPolicy, TokenResolver
from tokencraft.core.tokenspec_loader import TOKENSPEC_FILE, save_tokenspec

theme_app = typer.Typer(help="List and extend themes in the token config")

# Swatches shown by `theme list`
_PREVIEW_PATHS = {
    "Primary": "colors.primary.500",
    "Background": "semantic.background.primary",
    "Text": "semantic.text.primary",
}


@theme_app.command("list")
def theme_list(
    config_path: str = typer.Option(TOKENSPEC_FILE, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """List the themes declared in the config."""
    config = load_config_or_exit(config_path)

    rows = []
    for name in config.mode_names:
        resolver = TokenResolver(config, name, ResolutionPolicy.LENIENT)
        label = f"{name} (default)" if name == config.default_mode else name
        rows.append([label, *(resolver.resolve(path) for path in _PREVIEW_PATHS.values())])

    display_table("Themes", ["Theme", *_PREVIEW_PATHS], rows)


@theme_app.command("extend")
def theme_extend(
    base: str = typer.Argument(..., help="Theme to start from"),
    name: str = typer.Argument(..., help="Name of the new theme"),
    assignments: list[str] | None = typer.Option(
        None,
        "--set",
        "-s",
        help="Override as path=value, e.g. colors.primary.500=#e11d48 (repeatable)",
    ),
    config_path: str = typer.Option(TOKENSPEC_FILE, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Add a theme derived from an existing one and save the config."""
    config = load_config_or_exit(config_path)
    overrides = parse_assignments(assignments or [])

    try:
        extended = extend_theme(config, base, name, overrides)
    except UnknownModeError as e:
        print_error(e.message)
        raise typer.Exit(code=1) from e
    except ConfigValidationError as e:
        print_error(f"Theme '{name}' would make the config invalid:")
        for issue in e.errors:
            print_error(f"  {issue}")
        raise typer.Exit(code=1) from e

    path = save_tokenspec(Path(config_path), extended)
    if name in config.mode_names:
        print_info(f"Replaced existing theme '{name}'")
    print_success(f"Added theme '{name}' (from '{base}') to {path}")


def modes_command() -> None:
    """Show the built-in theme modes and their effect flags."""
    rows = []
    for mode in all_theme_modes():
        flags = ["✓" if mode.supports(effect) else "-" for effect in EFFECT_NAMES]
        rows.append([mode.name, mode.label, f".{mode.css_class}", *flags])

    display_table("Theme modes", ["Mode", "Label", "Class", *EFFECT_NAMES], rows)
