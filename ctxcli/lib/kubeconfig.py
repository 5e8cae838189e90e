"""Kubeconfig path resolution and file access"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from .codec import decode, encode
from .errors import ConfigIOError
from .model import Config

log = logging.getLogger(__name__)

KUBECONFIG_ENV = "KUBECONFIG"
DEFAULT_KUBECONFIG = "~/.kube/config"

DIR_MODE = 0o700
FILE_MODE = 0o600


def resolve_kubeconfig_path(override: str | Path | None = None) -> Path:
    """
    Resolve the kubeconfig path.

    Priority:
    1. Explicit override (--kubeconfig)
    2. KUBECONFIG environment variable, used as a single path
    3. <home>/.kube/config
    4. ~/.kube/config, expanded if possible (literal when no home is known)
    """
    if override:
        path = Path(override)
        log.debug(f"Using kubeconfig override: {path}")
        return path

    env_path = os.environ.get(KUBECONFIG_ENV)
    if env_path:
        path = Path(env_path)
        log.debug(f"Using {KUBECONFIG_ENV} from env: {path}")
        return path

    try:
        path = Path.home() / ".kube" / "config"
    except RuntimeError:
        path = Path(os.path.expanduser(DEFAULT_KUBECONFIG))
        log.debug(f"Home directory unknown, falling back to {path}")
        return path

    log.debug(f"Using default kubeconfig: {path}")
    return path


def load_kubeconfig(path: Path) -> Config:
    """Read and decode the kubeconfig at `path`."""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ConfigIOError(f"failed to read kubeconfig file: {e}") from e

    log.debug(f"Loaded {len(data)} bytes from {path}")
    return decode(data)


def _ensure_dir(directory: Path) -> None:
    """Create `directory` and any missing parents, each owner-only."""
    missing = []
    current = directory
    while not current.exists():
        missing.append(current)
        if current.parent == current:
            break
        current = current.parent

    for d in reversed(missing):
        d.mkdir(mode=DIR_MODE)
        log.debug(f"Created directory {d}")


def save_kubeconfig(config: Config, path: Path) -> None:
    """Encode `config` and atomically replace the file at `path`."""
    data = encode(config)
    # write through symlinks to the file they point at
    target = Path(os.path.realpath(path))

    try:
        _ensure_dir(target.parent)
    except OSError as e:
        raise ConfigIOError(f"failed to create config directory: {e}") from e

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "wb", dir=str(target.parent), prefix=f".{target.name}.", delete=False
        ) as handle:
            tmp_name = handle.name
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_name, FILE_MODE)
        os.replace(tmp_name, target)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ConfigIOError(f"failed to write config file: {e}") from e

    log.debug(f"Wrote {len(data)} bytes to {target}")
