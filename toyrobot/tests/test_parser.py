"""
Tests for the Command Parser.
"""

import pytest

from src.commands.parser import (
    Command,
    CommandParser,
    CommandParseError,
    ParsedCommand,
    parse_int,
    split_arguments,
)
from src.robot.direction import Direction


@pytest.fixture
def parser():
    return CommandParser()


class TestCommandLookup:
    """Tests for the command word table."""

    @pytest.mark.parametrize("word, expected", [
        ("place", Command.PLACE),
        ("MOVE", Command.MOVE),
        ("Left", Command.LEFT),
        ("rIgHt", Command.RIGHT),
        ("REPORT", Command.REPORT),
        ("exit", Command.EXIT),
    ])
    def test_lookup_case_insensitive(self, parser, word, expected):
        assert parser.lookup(word) == expected

    def test_lookup_unknown(self, parser):
        assert parser.lookup("jump") == Command.UNKNOWN


class TestParse:
    """Tests for CommandParser.parse."""

    @pytest.mark.parametrize("line, expected", [
        ("MOVE", Command.MOVE),
        ("left", Command.LEFT),
        ("RIGHT", Command.RIGHT),
        ("report", Command.REPORT),
        ("EXIT", Command.EXIT),
        ("   move   ", Command.MOVE),
    ])
    def test_simple_commands(self, parser, line, expected):
        parsed = parser.parse(line)
        assert isinstance(parsed, ParsedCommand)
        assert parsed.command == expected
        assert parsed.x is None
        assert parsed.facing is None
        assert parsed.line == line

    def test_extra_arguments_ignored(self, parser):
        assert parser.parse("MOVE 3 steps").command == Command.MOVE

    def test_place(self, parser):
        parsed = parser.parse("PLACE 1,2,NORTH")
        assert parsed.command == Command.PLACE
        assert (parsed.x, parsed.y, parsed.facing) == (1, 2, Direction.NORTH)

    def test_place_lowercase(self, parser):
        parsed = parser.parse("place 3,2,south")
        assert (parsed.x, parsed.y, parsed.facing) == (3, 2, Direction.SOUTH)

    def test_place_with_spaces(self, parser):
        parsed = parser.parse("PLACE 0, 4 , West")
        assert (parsed.x, parsed.y, parsed.facing) == (0, 4, Direction.WEST)

    def test_place_negative_coordinate_parses(self, parser):
        # Range checking is the robot's job
        parsed = parser.parse("PLACE -1,2,EAST")
        assert parsed.x == -1

    def test_place_unknown_facing_parses(self, parser):
        parsed = parser.parse("PLACE 1,1,UNKNOWN")
        assert parsed.facing == Direction.UNKNOWN

    def test_unknown_command(self, parser):
        with pytest.raises(CommandParseError) as exc_info:
            parser.parse("JUMP")
        assert "Unknown command" in str(exc_info.value)
        assert exc_info.value.line == "JUMP"
        assert exc_info.value.command is None

    def test_blank_line(self, parser):
        with pytest.raises(CommandParseError):
            parser.parse("   ")

    @pytest.mark.parametrize("line", [
        "PLACE",
        "PLACE 1,2",
        "PLACE 1,2,NORTH,4",
        "PLACE ,,",
    ])
    def test_place_wrong_argument_count(self, parser, line):
        with pytest.raises(CommandParseError) as exc_info:
            parser.parse(line)
        assert "Invalid number of arguments" in str(exc_info.value)
        assert exc_info.value.command == Command.PLACE

    def test_place_invalid_x(self, parser):
        with pytest.raises(CommandParseError, match="Invalid x value: a"):
            parser.parse("PLACE a,2,NORTH")

    def test_place_invalid_y(self, parser):
        with pytest.raises(CommandParseError, match="Invalid y value: 2.5"):
            parser.parse("PLACE 1,2.5,NORTH")

    def test_place_invalid_facing(self, parser):
        with pytest.raises(CommandParseError, match="Invalid facing direction: UP"):
            parser.parse("PLACE 1,2,UP")


class TestHelpers:
    """Tests for the text helpers."""

    def test_split_arguments(self):
        assert split_arguments("1,2,NORTH") == ["1", "2", "NORTH"]
        assert split_arguments(" 1 ,, 2 ,") == ["1", "2"]
        assert split_arguments("") == []

    def test_parse_int(self):
        assert parse_int("42") == 42
        assert parse_int("-3") == -3
        assert parse_int("+7") == 7
        assert parse_int("") is None
        assert parse_int("x1") is None
        assert parse_int("1.0") is None

    @pytest.mark.parametrize("text", ["0_1", "1_000", "٣", "１", " 1", "--1"])
    def test_parse_int_rejects_non_ascii_and_separators(self, text):
        assert parse_int(text) is None

    def test_place_with_digit_separator(self, parser):
        with pytest.raises(CommandParseError, match="Invalid x value: 0_1"):
            parser.parse("PLACE 0_1,0,NORTH")
