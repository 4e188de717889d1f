"""Command model — the unit the shell resolves and executes."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Callable, Union

from lightshell.errors import DuplicateCommandError
from lightshell.formatting import indent, wrap

logger = logging.getLogger(__name__)

HELP_WIDTH = 67
SUBCOMMAND_INDENT = 20
SUBCOMMAND_WIDTH = 47


@dataclass(frozen=True)
class Outcome:
    """What one shell cycle produced: text to print and whether to stop."""

    output: str | None = None
    exit: bool = False

    @classmethod
    def of(cls, value: HandlerResult) -> Outcome:
        if isinstance(value, Outcome):
            return value
        return cls(output=value)


HandlerResult = Union[str, Outcome, None]
CommandHandler = Callable[[Union[str, None]], HandlerResult]


def check_unique(command: Command, siblings: Iterable[Command]) -> None:
    """Raise DuplicateCommandError if ``command`` shares a name or alias with a sibling."""
    tokens = command.names
    for other in siblings:
        if other is command:
            continue
        for token in tokens:
            if other.matches(token):
                raise DuplicateCommandError(token, other.name)


@dataclass(eq=False)
class Command:
    name: str | None
    handler: CommandHandler | None = None
    aliases: list[str] = field(default_factory=list)
    short_help: str = ""
    usage: str = ""
    long_help: str = ""
    sub_commands: list[Command] = field(default_factory=list)

    def __post_init__(self) -> None:
        children = self.sub_commands
        self.sub_commands = []
        for child in children:
            self.add_subcommand(child)

    @property
    def names(self) -> list[str]:
        names = [self.name] if self.name is not None else []
        names.extend(self.aliases)
        return names

    @property
    def label(self) -> str:
        names = self.names
        return names[0] if names else ""

    def matches(self, token: str) -> bool:
        if self.name is not None and token == self.name:
            return True
        return token in self.aliases

    def execute(self, argument: str | None) -> HandlerResult:
        if self.handler is None:
            return self.help
        return self.handler(argument)

    def add_subcommand(self, command: Command) -> Command:
        if any(child is command for child in self.sub_commands):
            return command
        check_unique(command, self.sub_commands)
        self.sub_commands.append(command)
        logger.debug("Registered sub-command %r under %r", command.label, self.label)
        return command

    def subcommand(
        self,
        name: str | None,
        aliases: list[str] | None = None,
        short_help: str = "",
        usage: str = "",
        long_help: str = "",
    ) -> Callable[[CommandHandler], Command]:
        """Decorator that turns a handler function into a sub-command of this one."""

        def decorator(handler: CommandHandler) -> Command:
            return self.add_subcommand(
                Command(
                    name=name,
                    handler=handler,
                    aliases=aliases or [],
                    short_help=short_help,
                    usage=usage,
                    long_help=long_help,
                )
            )

        return decorator

    @property
    def help(self) -> str:
        sections: list[str] = []
        if self.usage:
            sections.append(f"usage: {self.usage}")

        description = self.long_help or self.short_help
        if description:
            sections.append("\n".join(wrap(description, HELP_WIDTH)))

        if self.sub_commands:
            listing = [
                indent(child.label, child.short_help, SUBCOMMAND_INDENT, SUBCOMMAND_WIDTH)
                for child in self.sub_commands
                if child.label
            ]
            sections.append("\n".join(["sub-commands:", *listing]))

        if not sections:
            return f"No help available for {self.label}."
        return "\n\n".join(sections)
