"""Word wrapping and two-column help layout."""

from __future__ import annotations

from collections.abc import Sequence

from lightshell.errors import FormatError


def _wrap_segment(segment: str, max_width: int) -> list[str]:
    lines: list[str] = []
    current: list[str] = []
    length = 0

    for word in segment.split():
        needed = len(word) if not current else length + 1 + len(word)
        if current and needed > max_width:
            lines.append(" ".join(current))
            current = [word]
            length = len(word)
        else:
            current.append(word)
            length = needed

    lines.append(" ".join(current))
    return lines


def wrap(text: str, max_width: int) -> list[str]:
    """Greedily wrap ``text`` so no line is longer than ``max_width``.

    Newlines in ``text`` are kept as hard breaks. A word longer than
    ``max_width`` is never split; it gets a line of its own.
    """
    if max_width <= 0:
        raise FormatError(f"Wrap width must be positive, got {max_width}")

    lines: list[str] = []
    for segment in text.split("\n"):
        lines.extend(_wrap_segment(segment, max_width))
    return lines


def indent_block(title: str, lines: Sequence[str], indent_width: int) -> str:
    """Render ``title`` in a fixed-width column next to ``lines``.

    The output looks like this::

        title        Here is a description of the
                     title. Each line lines up under
                     the first one.
    """
    # A title that fills the column widens it so the text keeps one space of gap.
    field = title.ljust(indent_width) if len(title) < indent_width else title + " "
    blank = " " * len(field)

    if not lines:
        return field

    rendered = [field + lines[0]]
    rendered.extend(blank + line for line in lines[1:])
    return "\n".join(rendered)


def indent(title: str, description: str, indent_width: int, max_width: int) -> str:
    return indent_block(title, wrap(description, max_width), indent_width)
