"""ctx CLI Main Entry Point

ctx - manage kubectl contexts and namespaces in a kubeconfig file.

Usage:
    ctx                            # List contexts
    ctx ls                         # List contexts
    ctx use <context> [namespace]  # Switch context, optionally set namespace
    ctx rm <context>               # Remove a context that is not active
    ctx -h                         # Show this help
    ctx -v                         # Show version
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from ._version import __version__
from .commands import list_command, remove_command, use_command
from .commands.utils import RM_USAGE, USAGE, USE_USAGE, setup_logging
from .lib.kubeconfig import resolve_kubeconfig_path


def print_usage(err: bool = False) -> None:
    typer.echo(USAGE, err=err)


def require_context_name(args: List[str], usage: str) -> str:
    """Return the context name argument or exit with a usage error."""
    if len(args) < 2:
        typer.secho("Error: context name required", err=True, fg=typer.colors.RED)
        typer.echo(usage, err=True)
        raise typer.Exit(code=1)
    return args[1]


typer_app = typer.Typer(add_completion=False)


@typer_app.command(
    add_help_option=False,
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
def cli(
    show_help: bool = typer.Option(
        False, "-h", "--help", is_eager=True, help="Show this help message."
    ),
    version: bool = typer.Option(
        False, "-v", "--version", help="Show version and exit."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Log which kubeconfig is read and written."
    ),
    kubeconfig: Optional[Path] = typer.Option(
        None, "--kubeconfig", help="Path to the kubeconfig file."
    ),
    args: Optional[List[str]] = typer.Argument(None),
) -> None:
    """Manage kubectl contexts and namespaces.

    \b
    Examples:
        ctx                         List all contexts
        ctx use my-cluster          Switch to context 'my-cluster'
        ctx use my-cluster default  Switch and set namespace 'default'
        ctx rm old-cluster          Remove context 'old-cluster'
    """
    if show_help:
        print_usage()
        raise typer.Exit()

    if version:
        typer.echo(f"ctx {__version__}")
        raise typer.Exit()

    setup_logging(verbose)
    args_list: List[str] = list(args) if args is not None else []
    command = args_list[0] if args_list else "ls"

    if command == "ls":
        list_command(resolve_kubeconfig_path(kubeconfig))
    elif command == "use":
        name = require_context_name(args_list, USE_USAGE)
        namespace = args_list[2] if len(args_list) > 2 else ""
        use_command(resolve_kubeconfig_path(kubeconfig), name, namespace)
    elif command == "rm":
        name = require_context_name(args_list, RM_USAGE)
        remove_command(resolve_kubeconfig_path(kubeconfig), name)
    else:
        typer.secho(
            f"Error: unknown command '{command}'", err=True, fg=typer.colors.RED
        )
        typer.echo(err=True)
        print_usage(err=True)
        raise typer.Exit(code=1)


def app(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    `argv` defaults to the process arguments.
    """
    typer_app(args=argv)


if __name__ == "__main__":
    app()
