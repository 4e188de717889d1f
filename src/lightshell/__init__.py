"""lightshell — an embeddable interactive command shell."""

__version__ = "0.1.0"

from lightshell.commands import Command, CommandRegistry, Outcome, exit_command
from lightshell.errors import ConfigError, DuplicateCommandError, FormatError, LightshellError
from lightshell.formatting import indent, indent_block, wrap
from lightshell.resolver import Resolution, resolve
from lightshell.shell import Shell

__all__ = [
    "Command",
    "CommandRegistry",
    "ConfigError",
    "DuplicateCommandError",
    "FormatError",
    "LightshellError",
    "Outcome",
    "Resolution",
    "Shell",
    "__version__",
    "exit_command",
    "indent",
    "indent_block",
    "resolve",
    "wrap",
]
