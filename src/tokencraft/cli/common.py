"""
Shared helpers for tokencraft CLI commands.
"""

import logging
from pathlib import Path
from typing import Any

import typer

from tokencraft.cli_ui import print_error
from tokencraft.core.errors import ConfigValidationError
from tokencraft.core.ir import TokenConfig
from tokencraft.core.tokenspec_loader import TOKENSPEC_FILE, TokenSpecError, load_tokenspec

CONFIG_HELP = f"Token config file (default: ./{TOKENSPEC_FILE})"


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def load_config_or_exit(config_path: str | None) -> TokenConfig:
    """Load the token config, printing every issue and exiting 1 on failure."""
    try:
        return load_tokenspec(Path(config_path or TOKENSPEC_FILE))
    except TokenSpecError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except ConfigValidationError as e:
        print_error(f"Invalid token config ({len(e.errors)} issue(s)):")
        for issue in e.errors:
            print_error(f"  {issue}")
        raise typer.Exit(code=1) from e


def parse_assignments(assignments: list[str]) -> dict[str, Any]:
    """Turn ``a.b.c=value`` pairs into a nested override document.

    Raises:
        typer.BadParameter: On a pair without ``=`` or with an empty path.
    """
    document: dict[str, Any] = {}
    for assignment in assignments:
        path, sep, value = assignment.partition("=")
        keys = [key for key in path.strip().split(".") if key]
        if not sep or not keys:
            raise typer.BadParameter(f"Expected path=value, got '{assignment}'")

        node = document
        for key in keys[:-1]:
            child = node.get(key)
            if not isinstance(child, dict):
                child = node[key] = {}
            node = child
        node[keys[-1]] = value.strip()
    return document
