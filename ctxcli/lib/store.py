"""Context Store

Operations over the contexts of one loaded kubeconfig.
"""

from __future__ import annotations

import logging

from .errors import ContextNotFoundError
from .model import Config, Context

log = logging.getLogger(__name__)


class ContextStore:
    """In-memory context operations on a `Config`.

    The store never self-heals: `current-context` may name a context that
    does not exist, and `remove` does not check whether the context is the
    active one. Refusing to remove the active context is left to callers.
    """

    def __init__(self, config: Config):
        self.config = config

    @property
    def current_context(self) -> str:
        """Name of the active context, or an empty string."""
        return self.config.current_context

    def list(self) -> list[Context]:
        """Contexts in file order."""
        return self.config.contexts

    def exists(self, name: str) -> bool:
        """Check if a context with exactly this name exists."""
        return any(ctx.name == name for ctx in self.config.contexts)

    def get(self, name: str) -> Context:
        """Get the first context with this name.

        Raises:
            ContextNotFoundError: If no context has that name.
        """
        for ctx in self.config.contexts:
            if ctx.name == name:
                return ctx
        raise ContextNotFoundError(name)

    def current(self) -> Context | None:
        """The context named by `current-context`, if any."""
        if not self.config.current_context:
            return None
        for ctx in self.config.contexts:
            if ctx.name == self.config.current_context:
                return ctx
        return None

    def current_namespace(self) -> str:
        """Namespace of the current context, or an empty string."""
        ctx = self.current()
        return ctx.namespace if ctx is not None else ""

    def set_current(self, name: str, namespace: str = "") -> Context:
        """Make `name` the current context and set its namespace.

        An empty `namespace` clears any namespace the context had.

        Raises:
            ContextNotFoundError: If no context has that name. The config is
                left untouched in that case.
        """
        ctx = self.get(name)
        ctx.namespace = namespace
        self.config.current_context = name
        log.debug(f"Current context set to '{name}' (namespace={namespace!r})")
        return ctx

    def remove(self, name: str) -> Context:
        """Remove the first context with this name, keeping the others in order.

        Raises:
            ContextNotFoundError: If no context has that name.
        """
        for i, ctx in enumerate(self.config.contexts):
            if ctx.name == name:
                del self.config.contexts[i]
                log.debug(f"Removed context '{name}'")
                return ctx
        raise ContextNotFoundError(name)
