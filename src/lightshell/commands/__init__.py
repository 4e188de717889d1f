from lightshell.commands.base import Command, CommandHandler, HandlerResult, Outcome
from lightshell.commands.builtins import exit_command
from lightshell.commands.registry import CommandRegistry

__all__ = [
    "Command",
    "CommandHandler",
    "CommandRegistry",
    "HandlerResult",
    "Outcome",
    "exit_command",
]
