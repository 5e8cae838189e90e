"""ctx - manage kubectl contexts and namespaces"""

from ._version import __version__

# Re-export from lib
from .lib import (
    ActiveContextError,
    Cluster,
    Config,
    ConfigIOError,
    Context,
    ContextNotFoundError,
    ContextStore,
    CtxError,
    User,
    decode,
    encode,
    load_kubeconfig,
    resolve_kubeconfig_path,
    save_kubeconfig,
)

__all__ = [
    "__version__",
    # model
    "Cluster",
    "Config",
    "Context",
    "User",
    # codec / file access
    "decode",
    "encode",
    "load_kubeconfig",
    "resolve_kubeconfig_path",
    "save_kubeconfig",
    # store
    "ContextStore",
    # errors
    "ActiveContextError",
    "ConfigIOError",
    "ContextNotFoundError",
    "CtxError",
]
