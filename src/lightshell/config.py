"""Configuration management — reads/writes ~/.config/lightshell/config.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from lightshell.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "lightshell"
CONFIG_FILE = CONFIG_DIR / "config.toml"
HISTORY_FILE = CONFIG_DIR / "history"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ShellConfig:
    prompt: str = "lightshell"
    welcome: str = ""
    history: bool = True
    log_level: str = "WARNING"
    help_indent: int = 20
    help_width: int = 47


def _escape_toml(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def ensure_config_dir() -> None:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)


def _read_file(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Could not read {path}: {e}") from e


def _expect(data: dict, key: str, kind: type, default):
    value = data.get(key, default)
    # bool is an int subclass; keep them apart.
    if (kind is int and isinstance(value, bool)) or not isinstance(value, kind):
        raise ConfigError(f'"{key}" must be of type {kind.__name__}, got {value!r}')
    return value


def load_config(path: Path | None = None) -> ShellConfig:
    data = _read_file(path or CONFIG_FILE)
    defaults = ShellConfig()

    config = ShellConfig(
        prompt=_expect(data, "prompt", str, defaults.prompt),
        welcome=_expect(data, "welcome", str, defaults.welcome),
        history=_expect(data, "history", bool, defaults.history),
        log_level=_expect(data, "log_level", str, defaults.log_level).upper(),
        help_indent=_expect(data, "help_indent", int, defaults.help_indent),
        help_width=_expect(data, "help_width", int, defaults.help_width),
    )

    if config.log_level not in LOG_LEVELS:
        raise ConfigError(f'"log_level" must be one of {", ".join(LOG_LEVELS)}, got {config.log_level!r}')
    if config.help_indent < 0:
        raise ConfigError(f'"help_indent" must not be negative, got {config.help_indent}')
    if config.help_width <= 0:
        raise ConfigError(f'"help_width" must be positive, got {config.help_width}')

    logger.debug("Loaded config from %s", path or CONFIG_FILE)
    return config


def save_config(config: ShellConfig, path: Path | None = None) -> None:
    # tomllib is read-only, so the file is written by hand.
    target = path or CONFIG_FILE
    if path is None:
        ensure_config_dir()
    lines = [
        f'prompt = "{_escape_toml(config.prompt)}"',
        f'welcome = "{_escape_toml(config.welcome)}"',
        f"history = {'true' if config.history else 'false'}",
        f'log_level = "{_escape_toml(config.log_level)}"',
        f"help_indent = {config.help_indent}",
        f"help_width = {config.help_width}",
    ]
    target.write_text("\n".join(lines) + "\n")
