"""
tokencraft CLI.

Commands:
- export: compile tokens to css, scss, json, js, ts, tailwind, components, modes
- validate: check a token config and list every issue
- theme list / theme extend: inspect and derive themes in the config
- modes: show the built-in theme-mode registry
- component: compile one component selection to CSS
"""

import platform
import sys

import typer

from tokencraft._version import __version__
from tokencraft.cli.common import configure_logging
from tokencraft.cli.component import component_command
from tokencraft.cli.export import export_command, validate_command
from tokencraft.cli.theme import modes_command, theme_app


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"tokencraft version {__version__}")
        python = f"{platform.python_implementation()} {platform.python_version()}"
        typer.echo(f"  Python:        {python}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


app = typer.Typer(
    help="""tokencraft - design-token compiler

Reads tokencraft.yaml from the current directory (or --config) and
compiles it to stylesheets, data modules and a Tailwind theme extension.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """tokencraft CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="export")(export_command)
app.command(name="validate")(validate_command)
app.command(name="modes")(modes_command)
app.command(name="component")(component_command)
app.add_typer(theme_app, name="theme")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = [
    "__version__",
    "app",
    "main",
    "theme_app",
    "version_callback",
]


if __name__ == "__main__":
    main(sys.argv[1:])
