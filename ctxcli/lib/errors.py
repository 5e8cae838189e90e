"""Shared error handling for ctx."""

from __future__ import annotations

import sys
from typing import NoReturn

import typer


class CtxError(Exception):
    """Base exception for ctx operations."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class ConfigIOError(CtxError):
    """Raised when the kubeconfig file cannot be read or written."""


class ContextNotFoundError(CtxError):
    """Raised when no context has the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"context '{name}' does not exist")


class ActiveContextError(CtxError):
    """Raised when trying to remove the currently active context."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"cannot remove currently active context '{name}'")


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def handle_error(error: Exception, command: str | None = None) -> NoReturn:
    """Handle and exit on ctx errors.

    `command` names the subcommand in the message for unexpected errors.
    """
    if isinstance(error, CtxError):
        exit_with_error(error.message, error.exit_code)
    else:
        where = f" in '{command}'" if command else ""
        typer.echo(f"Unexpected error{where}: {error}", err=True)
        sys.exit(1)
