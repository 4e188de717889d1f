"""Exception hierarchy for lightshell."""

from __future__ import annotations


class LightshellError(Exception):
    """Base class for every error raised by lightshell itself."""


class DuplicateCommandError(LightshellError):
    def __init__(self, token: str, existing: str | None) -> None:
        self.token = token
        self.existing = existing
        owner = existing if existing is not None else "an unnamed command"
        super().__init__(f'"{token}" is already used by {owner}')


class FormatError(LightshellError):
    pass


class ConfigError(LightshellError):
    pass
