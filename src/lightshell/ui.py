"""Rich-based terminal rendering for the shell."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

THEME = Theme(
    {
        "welcome": "bold cyan",
        "error": "bold red",
        "info": "bold cyan",
    }
)

console = Console(theme=THEME)


def print_welcome(message: str) -> None:
    if not message:
        return
    console.print(Text(message, style="welcome"))


def print_output(text: str) -> None:
    # Printed verbatim: no markup, emoji codes, highlighting or re-wrapping.
    console.print(Text(text), soft_wrap=True)


def print_error(message: str) -> None:
    console.print(Text.assemble(("  ✗ ", "error"), message))


def print_info(message: str) -> None:
    console.print(Text.assemble(("  ℹ ", "info"), message))
