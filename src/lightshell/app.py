"""Demo shell behind the ``lightshell`` console script."""

from __future__ import annotations

import sys

from lightshell import __version__, ui
from lightshell.commands import Command, CommandRegistry, exit_command
from lightshell.config import load_config
from lightshell.errors import ConfigError
from lightshell.log import setup_logging
from lightshell.shell import Shell

DEFAULT_WELCOME = f"Welcome to lightshell v{__version__}. Type 'help' for a list of commands."


def _echo(argument: str | None) -> str:
    return argument or ""


def build_registry() -> CommandRegistry:
    registry = CommandRegistry()

    echo = Command(
        name="echo",
        handler=_echo,
        short_help="print the given text back",
        usage="echo [upper|lower|reverse] <text>",
        long_help="Print the given text back. A sub-command changes the text first.",
    )
    echo.subcommand("upper", short_help="print the text in upper case", usage="echo upper <text>")(
        lambda arg: (arg or "").upper()
    )
    echo.subcommand("lower", short_help="print the text in lower case", usage="echo lower <text>")(
        lambda arg: (arg or "").lower()
    )
    echo.subcommand("reverse", aliases=["rev"], short_help="print the words in reverse order",
                    usage="echo reverse <text>")(
        lambda arg: " ".join(reversed((arg or "").split()))
    )

    registry.add(echo)
    registry.add(exit_command())
    return registry


def main() -> None:
    try:
        config = load_config()
    except ConfigError as e:
        ui.print_error(str(e))
        sys.exit(1)

    setup_logging(config.log_level)

    shell = Shell.from_config(config, registry=build_registry())
    if not shell.welcome_message:
        shell.welcome_message = DEFAULT_WELCOME

    try:
        shell.run()
    except KeyboardInterrupt:
        ui.console.print()
    except Exception as e:
        ui.print_error(f"Error: {e}")
        sys.exit(1)
    ui.print_info("Goodbye!")
