"""Tests for resolving input lines through the command tree."""

from lightshell.commands import Command, CommandRegistry
from lightshell.resolver import find_by_name_or_alias, resolve, split_head


def _registry() -> CommandRegistry:
    reg = CommandRegistry()
    git = Command(name="git", short_help="version control")
    git.add_subcommand(Command(name="commit", aliases=["ci"]))
    remote = git.add_subcommand(Command(name="remote"))
    remote.add_subcommand(Command(name="add"))
    reg.add(git)
    reg.add(Command(name="exit", aliases=["q", "quit"]))
    reg.add(Command(name="echo"))
    return reg


class TestSplitHead:
    def test_single_token(self):
        assert split_head("git") == ("git", None)

    def test_head_and_tail(self):
        assert split_head("git commit -m msg") == ("git", "commit -m msg")

    def test_whitespace_run(self):
        assert split_head("git \t  commit") == ("git", "commit")

    def test_blank(self):
        assert split_head("") == ("", None)
        assert split_head("   ") == ("", None)


class TestFindByNameOrAlias:
    def test_by_name(self):
        reg = _registry()
        assert find_by_name_or_alias("exit", reg) is reg.get("exit")

    def test_by_alias(self):
        reg = _registry()
        assert find_by_name_or_alias("q", reg) is reg.get("exit")

    def test_not_found(self):
        assert find_by_name_or_alias("bogus", _registry()) is None

    def test_unnamed_command_found_by_alias(self):
        hidden = Command(name=None, aliases=["h"])
        assert find_by_name_or_alias("h", [hidden]) is hidden

    def test_first_match_wins_in_unvalidated_list(self):
        first = Command(name="dup")
        second = Command(name="dup")
        assert find_by_name_or_alias("dup", [first, second]) is first


class TestResolve:
    def test_top_level_command(self):
        reg = _registry()
        result = resolve("exit", reg)

        assert result.command is reg.get("exit")
        assert result.argument is None

    def test_alias_equivalence(self):
        reg = _registry()
        assert resolve("q", reg).command is resolve("exit", reg).command
        assert resolve("quit", reg).command is resolve("exit", reg).command

    def test_leaf_command_keeps_whole_argument(self):
        reg = _registry()
        result = resolve("echo hello big world", reg)

        assert result.command is reg.get("echo")
        assert result.argument == "hello big world"

    def test_sub_command_descent(self):
        reg = _registry()
        result = resolve("git commit -m msg", reg)

        assert result.command.name == "commit"
        assert result.argument == "-m msg"

    def test_sub_command_by_alias(self):
        result = resolve("git ci -a", _registry())
        assert result.command.name == "commit"
        assert result.argument == "-a"

    def test_sub_command_without_argument(self):
        result = resolve("git commit", _registry())
        assert result.command.name == "commit"
        assert result.argument is None

    def test_descent_stops_at_first_non_match(self):
        reg = _registry()
        result = resolve("git push origin", reg)

        assert result.command is reg.get("git")
        assert result.argument == "push origin"

    def test_nested_descent(self):
        result = resolve("git remote add origin https://example.com/repo.git", _registry())

        assert result.command.name == "add"
        assert result.argument == "origin https://example.com/repo.git"
        assert [c.name for c in result.path] == ["git", "remote", "add"]

    def test_descent_does_not_skip_levels(self):
        # "add" is a grandchild of git, not a child.
        result = resolve("git add file.txt", _registry())

        assert result.command.name == "git"
        assert result.argument == "add file.txt"

    def test_unknown_command(self):
        assert resolve("bogus", _registry()) is None

    def test_unknown_command_in_empty_registry(self):
        assert resolve("bogus", CommandRegistry()) is None

    def test_blank_input(self):
        assert resolve("", _registry()) is None
        assert resolve("   ", _registry()) is None

    def test_sub_command_name_is_not_top_level(self):
        assert resolve("commit", _registry()) is None

    def test_is_deterministic(self):
        reg = _registry()
        assert resolve("git commit -m msg", reg) == resolve("git commit -m msg", reg)

    def test_commands_are_not_mutated(self):
        reg = _registry()
        resolve("git commit -m first", reg)
        result = resolve("git commit", reg)

        assert result.argument is None
        assert not hasattr(result.command, "argument")
