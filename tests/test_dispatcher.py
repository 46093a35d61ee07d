"""
Tests for the command dispatcher.

Tests cover:
- Command line parsing
- Built-ins (help, exit)
- Error reporting (identity preserved, session continues)
- Progress gating on is_long_running
"""

import contextlib

import pytest

from bucketnav.errors import TargetNotFoundError, UnknownCommandError
from bucketnav.shell.commands import PwdCommand
from bucketnav.shell.commands.base import Command
from bucketnav.shell.dispatcher import Dispatcher, parse_command
from bucketnav.types import Location


class ProgressSpy:
    """Progress factory that records the descriptions it was entered with."""

    def __init__(self):
        self.entered: list[str] = []

    def __call__(self, description):
        self.entered.append(description)
        return contextlib.nullcontext()


class TestParseCommand:
    """Command string parsing."""

    def test_parse_simple_command(self):
        assert parse_command("cd photos") == ("cd", ["photos"])

    def test_verb_is_lowercased(self):
        assert parse_command("  LS -l  ") == ("ls", ["-l"])

    def test_parse_command_with_quotes(self):
        assert parse_command('cd "my bucket/with space"') == ("cd", ["my bucket/with space"])

    def test_parse_empty_command_raises(self):
        with pytest.raises(ValueError, match="Empty command"):
            parse_command("")

    def test_unbalanced_quotes_raise(self):
        with pytest.raises(ValueError):
            parse_command('cd "oops')


class TestDispatch:
    """Line dispatch."""

    def test_blank_line(self, memory_storage, context, out):
        dispatcher = Dispatcher(memory_storage, context, out)
        assert dispatcher.dispatch("   ") is True
        assert out.lines == []

    @pytest.mark.parametrize("line", ["exit", "quit", "EXIT"])
    def test_exit(self, memory_storage, context, out, line):
        assert Dispatcher(memory_storage, context, out).dispatch(line) is False

    def test_help_lists_commands(self, memory_storage, context, out):
        Dispatcher(memory_storage, context, out).dispatch("help")
        text = out.getvalue()
        for usage in ("cd [path]", "ls [-l] [path]", "pwd", "help", "exit"):
            assert usage in text
        assert out.errors == []

    def test_unknown_command_reported(self, memory_storage, context, out):
        dispatcher = Dispatcher(memory_storage, context, out)
        assert dispatcher.dispatch("rm -rf /") is True
        assert isinstance(out.errors[0], UnknownCommandError)
        assert "Unknown command: rm" in out.getvalue()

    def test_unbalanced_quotes_reported(self, memory_storage, context, out):
        assert Dispatcher(memory_storage, context, out).dispatch('cd "oops') is True
        assert isinstance(out.errors[0], ValueError)

    def test_session_flow(self, memory_storage, context, out):
        dispatcher = Dispatcher(memory_storage, context, out)
        for line in ("cd photos", "cd 2024", "pwd", "cd ../..", "pwd"):
            assert dispatcher.dispatch(line) is True

        assert out.errors == []
        assert out.lines == ["/photos/2024/", "/"]

    def test_failure_reported_and_session_continues(self, memory_storage, context, out):
        dispatcher = Dispatcher(memory_storage, context, out)
        dispatcher.dispatch("cd nosuchbucket")
        dispatcher.dispatch("pwd")

        assert isinstance(out.errors[0], TargetNotFoundError)
        assert out.lines[-1] == "/"
        assert context.current == Location.root()

    def test_ctrl_c_cancels_command_not_session(self, make_storage, context, out):
        interrupt = KeyboardInterrupt()
        dispatcher = Dispatcher(make_storage(bucket_answer=interrupt), context, out)

        assert dispatcher.dispatch("cd bucket") is True
        assert out.errors == [interrupt]
        assert out.lines == ["Error: Interrupted"]
        assert context.current == Location.root()

        assert dispatcher.dispatch("pwd") is True
        assert out.lines[-1] == "/"


class TestRun:
    """Running a single command."""

    def test_returns_exception_unchanged(self, make_storage, context, out):
        err = OSError("network down")
        dispatcher = Dispatcher(make_storage(bucket_answer=err), context, out)
        command = dispatcher.commands["cd"](dispatcher.storage, context, ["bucket"])

        assert dispatcher.run(command) is err
        assert context.current == Location.root()

    def test_returns_none_on_success(self, make_storage, context, out):
        dispatcher = Dispatcher(make_storage(), context, out)
        assert dispatcher.run(PwdCommand(dispatcher.storage, context, [])) is None

    def test_probe_error_reported_as_is(self, make_storage, context, out):
        err = TimeoutError("probe timed out")
        dispatcher = Dispatcher(make_storage(path_answer=err), context, out)
        dispatcher.dispatch("cd bucket/folder")

        assert out.errors == [err]
        assert out.errors[0] is err


class TestProgressGating:
    """Progress is shown exactly for long-running commands."""

    @pytest.mark.parametrize("line, shown", [
        ("cd", False),
        ("cd /", False),
        ("pwd", False),
        ("cd bucket", True),
        ("cd bucket/../bucket", True),
        ("ls", True),
    ])
    def test_gating(self, make_storage, context, out, line, shown):
        spy = ProgressSpy()
        Dispatcher(make_storage(), context, out, progress=spy).dispatch(line)
        assert spy.entered == ([line] if shown else [])

    def test_decided_before_execute(self, make_storage, context, out):
        events: list[str] = []

        class Probe(Command):
            name = "probe"
            usage = "probe"
            summary = "records ordering"

            def is_long_running(self):
                events.append("is_long_running")
                return True

            def execute(self, out):
                events.append("execute")

        @contextlib.contextmanager
        def progress(description):
            events.append("progress-start")
            yield
            events.append("progress-stop")

        dispatcher = Dispatcher(make_storage(), context, out, progress=progress, commands={"probe": Probe})
        dispatcher.dispatch("probe")

        assert events == ["is_long_running", "progress-start", "execute", "progress-stop"]

    def test_progress_closed_on_failure(self, make_storage, context, out):
        events: list[str] = []

        @contextlib.contextmanager
        def progress(description):
            events.append("start")
            try:
                yield
            finally:
                events.append("stop")

        dispatcher = Dispatcher(make_storage(bucket_answer=False), context, out, progress=progress)
        dispatcher.dispatch("cd missing")

        assert events == ["start", "stop"]
        assert isinstance(out.errors[0], TargetNotFoundError)
