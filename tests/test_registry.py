"""Tests for command registry."""

import pytest

from lightshell.commands import Command, CommandRegistry
from lightshell.errors import DuplicateCommandError


def _noop_handler(argument):
    return None


class TestCommandRegistry:
    def test_register_and_get(self):
        reg = CommandRegistry()
        reg.register("conditions", _noop_handler, short_help="show license conditions")

        cmd = reg.get("conditions")
        assert cmd is not None
        assert cmd.name == "conditions"
        assert cmd.handler is _noop_handler
        assert cmd.short_help == "show license conditions"

    def test_get_by_alias(self):
        reg = CommandRegistry()
        reg.register("exit", _noop_handler, aliases=["q", "quit"])

        assert reg.get("q") is not None
        assert reg.get("quit") is not None
        assert reg.get("q").name == "exit"
        assert reg.get("quit").name == "exit"

    def test_get_unknown_returns_none(self):
        reg = CommandRegistry()
        assert reg.get("nonexistent") is None

    def test_iteration_keeps_registration_order(self):
        reg = CommandRegistry()
        for name in ("warranty", "conditions", "exit"):
            reg.register(name, _noop_handler)

        assert [c.name for c in reg] == ["warranty", "conditions", "exit"]
        assert [c.name for c in reg.commands] == ["warranty", "conditions", "exit"]
        assert len(reg) == 3

    def test_add_existing_command_object(self):
        reg = CommandRegistry()
        cmd = Command(name="exit")

        assert reg.add(cmd) is cmd
        assert cmd in reg
        assert Command(name="other") not in reg

    def test_adding_same_object_twice_is_noop(self):
        reg = CommandRegistry()
        cmd = Command(name="exit")
        reg.add(cmd)
        reg.add(cmd)

        assert len(reg) == 1

    def test_duplicate_name_rejected(self):
        reg = CommandRegistry()
        reg.register("exit", _noop_handler)

        with pytest.raises(DuplicateCommandError):
            reg.register("exit", _noop_handler)

    def test_alias_clashing_with_name_rejected(self):
        reg = CommandRegistry()
        reg.register("quit", _noop_handler)

        with pytest.raises(DuplicateCommandError):
            reg.register("exit", _noop_handler, aliases=["quit"])

    def test_name_clashing_with_alias_rejected(self):
        reg = CommandRegistry()
        reg.register("exit", _noop_handler, aliases=["q"])

        with pytest.raises(DuplicateCommandError) as exc_info:
            reg.register("q", _noop_handler)
        assert "exit" in str(exc_info.value)
        assert len(reg) == 1

    def test_decorator_registers_command(self):
        reg = CommandRegistry()

        @reg.command("greet", aliases=["hi"], short_help="say hello", usage="greet <name>")
        def greet(argument):
            return f"Hello, {argument}!"

        assert reg.get("hi") is greet
        assert greet.execute("Ada") == "Hello, Ada!"
        assert greet.usage == "greet <name>"

    def test_alias_does_not_shadow_other_command(self):
        reg = CommandRegistry()
        reg.register("search", _noop_handler, aliases=["s"])
        reg.register("star", _noop_handler, aliases=["flag"])

        assert reg.get("s").name == "search"
        assert reg.get("flag").name == "star"
        assert reg.get("star").name == "star"
