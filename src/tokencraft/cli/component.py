"""
Component preview command.
"""

import typer

from tokencraft.cli.common import CONFIG_HELP, load_config_or_exit
from tokencraft.cli_ui import print_error, print_warning
from tokencraft.core.errors import ResolutionError, UnknownModeError
from tokencraft.core.resolver import ResolutionPolicy
from tokencraft.core.style_compiler import compile_component, render_rule
from tokencraft.core.tokenspec_loader import TOKENSPEC_FILE


def component_command(
    name: str = typer.Argument(..., help="Component name in components.library"),
    variant: str | None = typer.Option(None, "--variant", help="Variant name"),
    size: str | None = typer.Option(None, "--size", help="Size name"),
    state: str | None = typer.Option(None, "--state", help="State name"),
    mode: str | None = typer.Option(
        None, "--mode", "-m", help="Theme mode (default: theme.default)"
    ),
    policy: ResolutionPolicy = typer.Option(
        ResolutionPolicy.STRICT, "--policy", case_sensitive=False, help="Resolution policy"
    ),
    config_path: str = typer.Option(TOKENSPEC_FILE, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Compile one component selection and print it as CSS."""
    config = load_config_or_exit(config_path)

    definition = config.components.library.get(name)
    if definition is None:
        available = ", ".join(config.components.library) or "none"
        print_error(f"Unknown component '{name}'. Available components: {available}")
        raise typer.Exit(code=1)

    try:
        rule = compile_component(
            definition,
            config,
            mode or config.default_mode,
            policy,
            variant=variant,
            size=size,
            state=state,
        )
    except (ResolutionError, UnknownModeError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if rule.is_empty:
        print_warning(f"Component '{name}' compiled to an empty rule")
        return
    typer.echo(render_rule(f".{name}", rule))
