"""The shell itself — input normalization, dispatch, help and the REPL loop."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter
from prompt_toolkit.history import FileHistory, History, InMemoryHistory

from lightshell import ui
from lightshell.commands.base import Command, CommandHandler, Outcome
from lightshell.commands.registry import CommandRegistry
from lightshell.config import HISTORY_FILE, ShellConfig
from lightshell.formatting import indent
from lightshell.resolver import Resolution, resolve, split_head

logger = logging.getLogger(__name__)

HELP_KEYWORD = "help"
UNKNOWN_COMMAND = "Unknown command. Type 'help' for a list of commands."
HELP_UNKNOWN_COMMAND = "help: Unknown command."


def normalize(raw: str) -> str:
    return " ".join(raw.split())


def _completion_tree(commands: list[Command]) -> dict[str, dict | None]:
    tree: dict[str, dict | None] = {}
    for command in commands:
        children = _completion_tree(command.sub_commands) or None
        for token in command.names:
            tree[token] = children
    return tree


class Shell:
    def __init__(
        self,
        prompt: str = "lightshell",
        welcome_message: str = "",
        registry: CommandRegistry | None = None,
        help_indent: int = 20,
        help_width: int = 47,
        history_file: Path | None = None,
        session: PromptSession | None = None,
    ) -> None:
        self.prompt = prompt
        self.welcome_message = welcome_message
        self.registry = registry if registry is not None else CommandRegistry()
        self.help_indent = help_indent
        self.help_width = help_width
        self.history_file = history_file
        self.session = session

    @classmethod
    def from_config(cls, config: ShellConfig, registry: CommandRegistry | None = None) -> Shell:
        return cls(
            prompt=config.prompt,
            welcome_message=config.welcome,
            registry=registry,
            help_indent=config.help_indent,
            help_width=config.help_width,
            history_file=HISTORY_FILE if config.history else None,
        )

    def add_command(self, command: Command) -> Command:
        """Add a command. It shows up in the help listing and can be run from the prompt."""
        return self.registry.add(command)

    def command(
        self,
        name: str | None,
        aliases: list[str] | None = None,
        short_help: str = "",
        usage: str = "",
        long_help: str = "",
    ) -> Callable[[CommandHandler], Command]:
        return self.registry.command(name, aliases, short_help, usage, long_help)

    def resolve(self, text: str) -> Resolution | None:
        return resolve(text, self.registry)

    def evaluate(self, raw: str) -> Outcome:
        """Run one line of input and return what it produced.

        Errors raised by a command are not caught here.
        """
        line = normalize(raw)
        head, rest = split_head(line)
        if head == HELP_KEYWORD:
            return Outcome(self.help(rest or ""))

        resolution = self.resolve(line)
        if resolution is None:
            logger.info("Unknown command: %r", line)
            return Outcome(UNKNOWN_COMMAND)

        return Outcome.of(resolution.command.execute(resolution.argument))

    def parse(self, raw: str) -> str | None:
        return self.evaluate(raw).output

    def help(self, argument: str = "") -> str:
        target = normalize(argument)
        if not target:
            return self.command_list()

        resolution = self.resolve(target)
        if resolution is None:
            return HELP_UNKNOWN_COMMAND
        return resolution.command.help

    def command_list(self) -> str:
        return "\n".join(
            indent(command.label, command.short_help, self.help_indent, self.help_width)
            for command in self.registry
            if command.label
        )

    def _history(self) -> History:
        if self.history_file is None:
            return InMemoryHistory()
        self.history_file.parent.mkdir(parents=True, exist_ok=True)
        return FileHistory(str(self.history_file))

    def _make_session(self) -> PromptSession:
        tree = _completion_tree(self.registry.commands)
        tree[HELP_KEYWORD] = dict(tree) or None
        return PromptSession(
            history=self._history(),
            completer=NestedCompleter.from_nested_dict(tree),
        )

    def run(self) -> None:
        """Print the welcome message, then read and run lines until told to stop."""
        if self.session is None:
            self.session = self._make_session()

        ui.print_welcome(self.welcome_message)

        while True:
            try:
                line = self.session.prompt(f"{self.prompt}> ")
            except KeyboardInterrupt:
                continue
            except EOFError:
                logger.debug("End of input, leaving the shell")
                break

            outcome = self.evaluate(line)
            if outcome.output is not None:
                ui.print_output(outcome.output)
            if outcome.exit:
                break
