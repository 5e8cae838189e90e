"""CLI commands"""

from .list import list_command
from .remove import remove_command
from .use import use_command

__all__ = ["list_command", "use_command", "remove_command"]
