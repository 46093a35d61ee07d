"""
Tests for ls, pwd and the command registry.
"""

from datetime import datetime, timezone

import pytest

from bucketnav.errors import CommandUsageError, InvalidPathError, TargetNotFoundError, UnknownCommandError
from bucketnav.shell.commands import COMMANDS, LsCommand, PwdCommand, build_command, new_ls, new_pwd
from bucketnav.shell.commands.ls import format_entry
from bucketnav.shell.context import Context
from bucketnav.storage.memory import InMemoryStorage
from bucketnav.types import ListingEntry, Location


class TestPwd:
    """Tests for pwd."""

    @pytest.mark.parametrize("location, expected", [
        (Location(), "/"),
        (Location(bucket="bucket"), "/bucket/"),
        (Location(bucket="bucket", prefix="a/b/"), "/bucket/a/b/"),
    ])
    def test_prints_location(self, make_storage, out, location, expected):
        storage = make_storage()
        new_pwd(storage, Context(location), []).execute(out)
        assert out.lines == [expected]
        assert storage.calls == []

    def test_not_long_running(self, make_storage, context):
        assert PwdCommand(make_storage(), context, []).is_long_running() is False


class TestLs:
    """Tests for ls."""

    def test_root_lists_buckets(self, memory_storage, context, out):
        new_ls(memory_storage, context, []).execute(out)
        assert out.getvalue() == "backups/\nempty/\nphotos/"

    def test_bucket_lists_prefixes_then_objects(self, memory_storage, out):
        context = Context(Location(bucket="photos"))
        new_ls(memory_storage, context, []).execute(out)
        assert out.getvalue() == "2024/\nreadme.txt"

    def test_relative_path_argument(self, memory_storage, out):
        context = Context(Location(bucket="photos"))
        new_ls(memory_storage, context, ["2024"]).execute(out)
        assert out.getvalue() == "summer/\nbeach.jpg"

    def test_does_not_move(self, memory_storage, context, out):
        new_ls(memory_storage, context, ["photos/2024"]).execute(out)
        assert context.current == Location.root()
        assert context.previous is None

    def test_empty_bucket_prints_nothing(self, memory_storage, out):
        new_ls(memory_storage, Context(), ["empty"]).execute(out)
        assert out.lines == []

    def test_missing_prefix(self, memory_storage, context, out):
        with pytest.raises(TargetNotFoundError):
            new_ls(memory_storage, context, ["photos/nope"]).execute(out)

    def test_folder_marker_prefix_prints_nothing(self, out):
        storage = InMemoryStorage({"b": ["empty/"]})
        context = Context(Location(bucket="b", prefix="empty/"))
        new_ls(storage, context, []).execute(out)
        assert out.lines == []

    def test_empty_listing_checks_prefix_exists(self, make_storage, out):
        storage = make_storage(path_answer=False)
        with pytest.raises(TargetNotFoundError):
            new_ls(storage, Context(Location(bucket="b")), ["gone"]).execute(out)
        assert storage.calls == [
            ("list_entries", "b", "gone/"),
            ("path_exists", "b", "gone/"),
        ]

    def test_invalid_path(self, memory_storage, context, out):
        with pytest.raises(InvalidPathError):
            new_ls(memory_storage, context, [".."]).execute(out)

    def test_unknown_option(self, make_storage, context, out):
        storage = make_storage()
        with pytest.raises(CommandUsageError):
            new_ls(storage, context, ["-x"]).execute(out)
        assert storage.calls == []

    def test_long_listing(self, make_storage, out):
        modified = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
        storage = make_storage(entries=[
            ListingEntry(name="sub/", is_prefix=True),
            ListingEntry(name="file.txt", size=42, last_modified=modified),
        ])
        new_ls(storage, Context(Location(bucket="b")), ["-l"]).execute(out)

        lines = out.getvalue().splitlines()
        assert lines[0].split() == ["PRE", "sub/"]
        assert lines[1].split() == ["42", "2024-05-01", "12:30", "file.txt"]
        assert storage.calls == [("list_entries", "b", "")]

    def test_double_dash_allows_dash_names(self, make_storage, out):
        storage = make_storage(entries=[ListingEntry(name="x")])
        new_ls(storage, Context(Location(bucket="b")), ["--", "-odd"]).execute(out)
        assert storage.calls == [("list_entries", "b", "-odd/")]

    def test_storage_errors_propagate(self, make_storage, context, out):
        class Boom(Exception):
            pass

        err = Boom("listing failed")

        class FailingStorage(make_storage):
            def list_entries(self, bucket, prefix=""):
                raise err

        with pytest.raises(Boom) as exc_info:
            new_ls(FailingStorage(), context, ["bucket"]).execute(out)
        assert exc_info.value is err

    @pytest.mark.parametrize("args, expected", [
        ([], True),
        (["-l"], True),
        (["bucket/x"], True),
        ([".."], False),
        (["-x"], False),
    ])
    def test_is_long_running(self, make_storage, context, args, expected):
        storage = make_storage()
        assert LsCommand(storage, context, args).is_long_running() is expected
        assert storage.calls == []


class TestFormatEntry:
    """Tests for listing line rendering."""

    def test_short(self):
        assert format_entry(ListingEntry(name="a.txt", size=3)) == "a.txt"

    def test_long_without_metadata(self):
        line = format_entry(ListingEntry(name="a.txt"), long=True)
        assert line.strip() == "a.txt"


class TestRegistry:
    """Tests for command construction by verb."""

    def test_registered_verbs(self):
        assert set(COMMANDS) == {"cd", "ls", "pwd"}

    @pytest.mark.parametrize("verb", ["cd", "ls", "pwd"])
    def test_build_command(self, make_storage, context, verb):
        storage = make_storage()
        command = build_command(verb, storage, context, ["x"])
        assert isinstance(command, COMMANDS[verb])
        assert command.storage is storage
        assert command.context is context
        assert command.args == ["x"]

    def test_unknown_verb(self, make_storage, context):
        with pytest.raises(UnknownCommandError) as exc_info:
            build_command("rm", make_storage(), context, [])
        assert exc_info.value.verb == "rm"

    def test_custom_registry(self, make_storage, context):
        command = build_command("where", make_storage(), context, [], {"where": PwdCommand})
        assert isinstance(command, PwdCommand)
