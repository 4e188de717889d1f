"""Resolve an input line to a command in the command tree.

The first token is looked up among the top-level commands. As long as the
matched command has sub-commands and there is argument text left, the next
token is looked up among its children. Resolution stops at the first token
that names no child; everything not consumed is the command's argument.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import NamedTuple

from lightshell.commands.base import Command

logger = logging.getLogger(__name__)


class Resolution(NamedTuple):
    command: Command
    argument: str | None
    path: tuple[Command, ...] = ()


def split_head(text: str) -> tuple[str, str | None]:
    parts = text.split(None, 1)
    if not parts:
        return "", None
    if len(parts) == 1:
        return parts[0], None
    return parts[0], parts[1]


def find_by_name_or_alias(token: str, candidates: Iterable[Command]) -> Command | None:
    # Duplicates are rejected at registration; with a hand-built tree the first match wins.
    for command in candidates:
        if command.matches(token):
            return command
    return None


def resolve(text: str, candidates: Iterable[Command]) -> Resolution | None:
    head, argument = split_head(text)
    if not head:
        return None

    command = find_by_name_or_alias(head, candidates)
    if command is None:
        logger.debug("No command matches %r", head)
        return None

    path = [command]
    while command.sub_commands and argument is not None:
        sub_head, sub_tail = split_head(argument)
        child = find_by_name_or_alias(sub_head, command.sub_commands)
        if child is None:
            break
        command, argument = child, sub_tail
        path.append(command)

    resolution = Resolution(command, argument, tuple(path))
    logger.debug(
        "Resolved %r to %s with argument %r",
        text,
        " ".join(c.label for c in resolution.path),
        resolution.argument,
    )
    return resolution
