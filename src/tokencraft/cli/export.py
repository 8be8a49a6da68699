"""
Export and validate commands.
"""

from pathlib import Path

import typer

from tokencraft.cli.common import CONFIG_HELP, load_config_or_exit
from tokencraft.cli_ui import print_error, print_success, print_warning
from tokencraft.core.errors import ConfigValidationError, UnknownModeError, UnsupportedFormatError
from tokencraft.core.pipeline import ALL_MODES, export_tokens
from tokencraft.core.resolver import ResolutionPolicy
from tokencraft.core.tokenspec_loader import (
    TOKENSPEC_FILE,
    TokenSpecError,
    read_tokenspec_document,
)
from tokencraft.core.validator import validate_tokenspec
from tokencraft.emitters import SUPPORTED_FORMATS


def export_command(
    format: str = typer.Argument(
        ...,
        help=f"Output format ({', '.join(SUPPORTED_FORMATS)}); comma-separate for several",
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output file or directory (default: tokens.output)"
    ),
    mode: str = typer.Option(
        ALL_MODES, "--mode", "-m", help="Theme mode, comma-separated modes, or 'all'"
    ),
    prefix: str | None = typer.Option(
        None, "--prefix", help="Override the custom property prefix"
    ),
    config_path: str = typer.Option(TOKENSPEC_FILE, "--config", "-c", help=CONFIG_HELP),
    policy: ResolutionPolicy = typer.Option(
        ResolutionPolicy.STRICT,
        "--policy",
        case_sensitive=False,
        help="strict: fail on bad references; lenient: fall back to CSS variables",
    ),
    workers: int | None = typer.Option(
        None, "--workers", "-w", min=1, help="Parallel export jobs (default: executor default)"
    ),
) -> None:
    """Export design tokens to one or more formats."""
    config = load_config_or_exit(config_path)

    try:
        report = export_tokens(
            config,
            format,
            output_path=Path(output) if output else None,
            mode_selector=mode,
            prefix=prefix,
            policy=policy,
            max_workers=workers,
        )
    except (UnsupportedFormatError, UnknownModeError, ConfigValidationError) as e:
        print_error(e.message)
        raise typer.Exit(code=1) from e

    for result in report.results:
        if result.ok:
            print_success(f"Wrote {result.path}")
        else:
            print_error(result.describe_failure())

    if not report.ok:
        print_error(f"{len(report.failures)} of {len(report.results)} export job(s) failed")
        raise typer.Exit(code=1)


def validate_command(
    config_path: str = typer.Option(TOKENSPEC_FILE, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Validate a token config, listing every issue at once."""
    try:
        document = read_tokenspec_document(Path(config_path))
    except TokenSpecError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    result = validate_tokenspec(document)
    for warning in result.warnings:
        print_warning(warning)

    if not result.is_valid:
        print_error(f"{config_path}: {len(result.errors)} error(s)")
        for error in result.errors:
            print_error(f"  {error}")
        raise typer.Exit(code=1)

    if result.config is None:
        print_error(f"{config_path}: no configuration was produced")
        raise typer.Exit(code=1)

    themes = ", ".join(result.config.mode_names)
    print_success(f"{config_path} is valid (themes: {themes})")
