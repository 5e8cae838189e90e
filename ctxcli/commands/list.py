"""List command - list all contexts"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from ctxcli.lib.errors import handle_error
from ctxcli.lib.kubeconfig import load_kubeconfig
from ctxcli.lib.store import ContextStore

log = logging.getLogger(__name__)


def format_context_line(name: str, current: bool, namespace: str = "") -> str:
    """Format one listing line: `* name (namespace: ns)` or `  name`."""
    marker = "*" if current else " "
    line = f"{marker} {name}"
    if current and namespace:
        line += f" (namespace: {namespace})"
    return line


def list_command(path: Path) -> None:
    """List all contexts, marking the current one."""
    try:
        store = ContextStore(load_kubeconfig(path))
    except Exception as e:
        handle_error(e, "ls")

    contexts = store.list()
    log.info(f"Found {len(contexts)} contexts in {path}")

    if not contexts:
        typer.echo("No contexts found")
        return

    namespace = store.current_namespace()
    for ctx in contexts:
        current = ctx.name == store.current_context
        typer.echo(format_context_line(ctx.name, current, namespace))
