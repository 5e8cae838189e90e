"""Use command - switch the current context"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from ctxcli.lib.errors import ContextNotFoundError, handle_error
from ctxcli.lib.kubeconfig import load_kubeconfig, save_kubeconfig
from ctxcli.lib.store import ContextStore

log = logging.getLogger(__name__)


def use_command(path: Path, name: str, namespace: str = "") -> None:
    """Switch to context `name`, setting (or clearing) its namespace."""
    try:
        config = load_kubeconfig(path)
        store = ContextStore(config)

        if not store.exists(name):
            raise ContextNotFoundError(name)

        store.set_current(name, namespace)
        save_kubeconfig(config, path)
        log.info(f"Saved {path}")
    except Exception as e:
        handle_error(e, "use")

    if namespace:
        typer.echo(f"Switched to context '{name}' with namespace '{namespace}'")
    else:
        typer.echo(f"Switched to context '{name}'")
