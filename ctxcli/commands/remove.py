"""Remove command - delete a context that is not in use"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from ctxcli.lib.errors import ActiveContextError, ContextNotFoundError, handle_error
from ctxcli.lib.kubeconfig import load_kubeconfig, save_kubeconfig
from ctxcli.lib.store import ContextStore

log = logging.getLogger(__name__)


def remove_command(path: Path, name: str) -> None:
    """Remove context `name`. The active context cannot be removed."""
    try:
        config = load_kubeconfig(path)
        store = ContextStore(config)

        if not store.exists(name):
            raise ContextNotFoundError(name)
        if store.current_context == name:
            raise ActiveContextError(name)

        store.remove(name)
        save_kubeconfig(config, path)
        log.info(f"Saved {path}")
    except Exception as e:
        handle_error(e, "rm")

    typer.echo(f"Removed context '{name}'")
