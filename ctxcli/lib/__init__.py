"""Kubeconfig model, codec, file access and context store"""

from .codec import decode, encode
from .errors import (
    ActiveContextError,
    ConfigIOError,
    ContextNotFoundError,
    CtxError,
)
from .kubeconfig import load_kubeconfig, resolve_kubeconfig_path, save_kubeconfig
from .model import Cluster, Config, Context, User
from .store import ContextStore

__all__ = [
    "ActiveContextError",
    "Cluster",
    "Config",
    "ConfigIOError",
    "Context",
    "ContextNotFoundError",
    "ContextStore",
    "CtxError",
    "User",
    "decode",
    "encode",
    "load_kubeconfig",
    "resolve_kubeconfig_path",
    "save_kubeconfig",
]
