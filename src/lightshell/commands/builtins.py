"""Commands every shell can use as-is."""

from __future__ import annotations

from lightshell.commands.base import Command, Outcome


def _exit(argument: str | None) -> Outcome:
    return Outcome(exit=True)


def exit_command() -> Command:
    return Command(
        name="exit",
        handler=_exit,
        aliases=["q", "quit"],
        short_help="exit the program (q and quit do the same)",
        usage="exit",
    )
