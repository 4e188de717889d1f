"""Command registry — the ordered set of top-level commands."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Callable

from lightshell.commands.base import Command, CommandHandler, check_unique

logger = logging.getLogger(__name__)


class CommandRegistry:
    def __init__(self) -> None:
        self._commands: list[Command] = []

    def add(self, command: Command) -> Command:
        if command in self:
            return command
        check_unique(command, self._commands)
        self._commands.append(command)
        logger.debug("Registered command %r (aliases: %s)", command.label, ", ".join(command.aliases) or "none")
        return command

    def register(
        self,
        name: str | None,
        handler: CommandHandler | None = None,
        aliases: list[str] | None = None,
        short_help: str = "",
        usage: str = "",
        long_help: str = "",
    ) -> Command:
        return self.add(
            Command(
                name=name,
                handler=handler,
                aliases=aliases or [],
                short_help=short_help,
                usage=usage,
                long_help=long_help,
            )
        )

    def command(
        self,
        name: str | None,
        aliases: list[str] | None = None,
        short_help: str = "",
        usage: str = "",
        long_help: str = "",
    ) -> Callable[[CommandHandler], Command]:
        """Decorator variant of :meth:`register`."""

        def decorator(handler: CommandHandler) -> Command:
            return self.register(name, handler, aliases, short_help, usage, long_help)

        return decorator

    def get(self, token: str) -> Command | None:
        for command in self._commands:
            if command.matches(token):
                return command
        return None

    @property
    def commands(self) -> list[Command]:
        return list(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, command: object) -> bool:
        return any(existing is command for existing in self._commands)
