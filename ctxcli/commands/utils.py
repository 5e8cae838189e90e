"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

err_console = Console(stderr=True)

USAGE = """\
ctx - A CLI tool for managing kubectl contexts and namespaces

Usage:
  ctx                              List all contexts (default)
  ctx ls                           List all contexts
  ctx use <context> [namespace]    Switch to a context and optionally set namespace
  ctx rm <context>                 Remove a context
  ctx --help                       Show this help message

Options:
  --kubeconfig PATH                Use this kubeconfig instead of $KUBECONFIG or ~/.kube/config
  --verbose                        Show what ctx reads and writes
  -v, --version                    Show version and exit

Examples:
  ctx                              # List all contexts
  ctx ls                           # List all contexts
  ctx use my-cluster               # Switch to context 'my-cluster'
  ctx use my-cluster default       # Switch to context and set namespace to 'default'
  ctx use "complex context-name" namespace  # Handle context names with spaces
  ctx rm old-cluster               # Remove context 'old-cluster'

Note: For context names with spaces, use quotes:
  ctx use "complex context-name" namespace"""

USE_USAGE = "Usage: ctx use <context> [namespace]"
RM_USAGE = "Usage: ctx rm <context>"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the ctx CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (--verbose): INFO level - shows which file is used and written
    - Debug (CTX_DEBUG=1): DEBUG level - shows everything, overrides --verbose
    """
    debug = bool(os.environ.get("CTX_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=err_console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("ctxcli")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False
