import pytest

from robot_command import Command, Direction, Position, Step, parse_command
from robot_errors import (
    CommandParseError,
    IntegerFormatError,
    MapFormatError,
    MissingSectionError,
    SectionCountError,
    StartFormatError,
    StepFormatError,
    UnknownSectionError,
)

SAMPLE = "M:-10,10,-10,10;S:-5,5;[W5,E5,N4,E3,S2,W1]"


def test_parse_sample_command():
    command = parse_command(SAMPLE)
    assert command.min_pos == (-10, -10)
    assert command.max_pos == (10, 10)
    assert command.start_pos == (-5, 5)
    assert [str(s) for s in command.steps] == ["W5", "E5", "N4", "E3", "S2", "W1"]
    assert command.steps[2] == Step(Direction.NORTH, 4)
    assert command.total_distance == 20


def test_map_fields_are_assembled_as_min_and_max_corners():
    command = parse_command("M:1,2,3,4;S:1,3;[N1]")
    assert command.min_pos == Position(1, 3)
    assert command.max_pos == Position(2, 4)


def test_sections_in_any_order():
    command = parse_command("[W5,E5];S:-5,5;M:-10,10,-10,10")
    assert command == parse_command("M:-10,10,-10,10;S:-5,5;[W5,E5]")


@pytest.mark.parametrize(
    "text",
    [
        SAMPLE,
        "M:0,5,0,5;S:4,4;[N2]",
        "M:-3,-1,7,9;S:-2,8;[S1,W1,E2]",
        "M:0,1,0,1;S:0,0;[]",
    ],
)
def test_to_string_preserves_content(text):
    command = parse_command(text)
    assert command.to_string() == text
    assert parse_command(command.to_string()) == command


def test_empty_step_list():
    command = parse_command("M:0,1,0,1;S:0,0;[]")
    assert command.steps == ()
    assert command.total_distance == 0


def test_signs_and_whitespace_in_integers():
    command = parse_command("M: -2 ,+2,-2,2;S:0, 1;[N+1]")
    assert command.min_pos == (-2, -2)
    assert command.max_pos == (2, 2)
    assert command.start_pos == (0, 1)
    assert command.steps == (Step(Direction.NORTH, 1),)


@pytest.mark.parametrize("text,count", [("M:0,1,0,1;S:0,0", 2), ("a;b;c;d", 4), ("", 1)])
def test_section_count_error(text, count):
    with pytest.raises(SectionCountError) as excinfo:
        parse_command(text)
    assert excinfo.value.count == count
    assert str(count) in str(excinfo.value)


def test_map_format_error():
    with pytest.raises(MapFormatError) as excinfo:
        parse_command("M:1,2,3;S:0,0;[]")
    assert excinfo.value.text == "M:1,2,3"


def test_start_format_error():
    with pytest.raises(StartFormatError):
        parse_command("M:0,5,0,5;S:1,2,3;[N1]")


def test_unknown_section_names_the_section():
    with pytest.raises(UnknownSectionError, match="A:1,2") as excinfo:
        parse_command("A:1,2;S:0,0;[]")
    assert excinfo.value.text == "A:1,2"


@pytest.mark.parametrize(
    "text",
    ["M:0,5,0,5;S:0,0;[N1", "M:0,5,0,5;S:0,0;N1]", "m:0,5,0,5;S:0,0;[N1]"],
)
def test_malformed_section_is_unknown(text):
    with pytest.raises(UnknownSectionError):
        parse_command(text)


@pytest.mark.parametrize("token", ["X3", "n3", "", "3N"])
def test_step_format_error_on_direction(token):
    with pytest.raises(StepFormatError):
        parse_command(f"M:0,5,0,5;S:0,0;[N1,{token}]")


@pytest.mark.parametrize("token", ["N0", "E-2"])
def test_non_positive_distance_is_rejected(token):
    with pytest.raises(StepFormatError, match="positive"):
        parse_command(f"M:0,5,0,5;S:0,0;[{token}]")


@pytest.mark.parametrize(
    "text",
    [
        "M:0,five,0,5;S:0,0;[N1]",
        "M:0,5,0,5;S:0,1.5;[N1]",
        "M:0,5,0,5;S:0,0;[N]",
        "M:0,5,0,5;S:0,0;[Nx]",
        "M:0,5,0,5;S:,0;[N1]",
        "M:0,1_0,0,5;S:0,0;[N1]",
    ],
)
def test_integer_format_error(text):
    with pytest.raises(IntegerFormatError):
        parse_command(text)


def test_first_error_wins():
    # Map error comes before the step error in the string.
    with pytest.raises(MapFormatError):
        parse_command("M:1;S:0,0;[X1]")


def test_missing_section():
    with pytest.raises(MissingSectionError) as excinfo:
        parse_command("M:0,5,0,5;M:0,5,0,5;[N1]")
    assert excinfo.value.missing == ["start"]


def test_all_errors_share_a_base_class():
    for text in ["x", "M:1;S:0,0;[]", "Q;S:0,0;[]", "M:0,1,0,1;S:0,0;[Z1]"]:
        with pytest.raises(CommandParseError):
            parse_command(text)


def test_is_in_bounds_is_half_open():
    command = Command(Position(0, 0), Position(5, 5), Position(0, 0))
    assert command.is_in_bounds((0, 0))
    assert command.is_in_bounds((4, 4))
    assert not command.is_in_bounds((5, 0))
    assert not command.is_in_bounds((0, 5))
    assert not command.is_in_bounds((-1, 2))


def test_direction_offsets_and_letters():
    assert Direction.NORTH.offset == (0, 1)
    assert Direction.EAST.offset == (1, 0)
    assert Direction.SOUTH.offset == (0, -1)
    assert Direction.WEST.offset == (-1, 0)
    assert Direction.from_letter("W") is Direction.WEST
    assert Direction.from_letter("w") is None
    assert Position(1, 1).moved(Direction.SOUTH) == (1, 0)


def test_command_str():
    command = parse_command("M:0,5,0,5;S:4,4;[N2]")
    assert str(command) == "MinPos=(0, 0), MaxPos=(5, 5), StartPos=(4, 4), Steps=[N2]"
