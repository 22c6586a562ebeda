import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

from robot_errors import (
    IntegerFormatError,
    MapFormatError,
    MissingSectionError,
    SectionCountError,
    StartFormatError,
    StepFormatError,
    UnknownSectionError,
)

logger = logging.getLogger("robo_grid")

# =============================================================================
# CONFIGURATION & CONSTANTS
# =============================================================================
SECTION_SEPARATOR = ";"
FIELD_SEPARATOR = ","
MAP_PREFIX = "M:"
START_PREFIX = "S:"
STEPS_OPEN, STEPS_CLOSE = "[", "]"

# Direction deltas [dx, dy]
DIRECTION_DELTA = [
    [0,  1],  # North: Y+
    [1,  0],  # East:  X+
    [0, -1],  # South: Y-
    [-1, 0]   # West:  X-
]
DIRECTION_LETTERS = ["N", "E", "S", "W"]

_INT_RE = re.compile(r"[+-]?[0-9]+")

# Example: M:-10,10,-10,10;S:-5,5;[W5,E5,N4,E3,S2,W1]


# =============================================================================
# DATA STRUCTURES
# =============================================================================
class Direction(Enum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def offset(self) -> Tuple[int, int]:
        dx, dy = DIRECTION_DELTA[self.value]
        return dx, dy

    @property
    def letter(self) -> str:
        return DIRECTION_LETTERS[self.value]

    @classmethod
    def from_letter(cls, letter: str) -> Optional["Direction"]:
        """Case-sensitive lookup; returns None for anything but N/E/S/W."""
        if letter in DIRECTION_LETTERS:
            return cls(DIRECTION_LETTERS.index(letter))
        return None


class Position(NamedTuple):
    x: int
    y: int

    def moved(self, direction: Direction) -> "Position":
        dx, dy = direction.offset
        return Position(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Step:
    """One leg of the path: a direction plus a number of unit moves"""
    direction: Direction
    distance: int

    def get_offset(self) -> Tuple[int, int]:
        return self.direction.offset

    def __str__(self) -> str:
        return f"{self.direction.letter}{self.distance}"


@dataclass(frozen=True)
class Command:
    """Parsed robot command. Bounds are half-open: min inclusive, max exclusive."""
    min_pos: Position
    max_pos: Position
    start_pos: Position
    steps: Tuple[Step, ...] = ()

    @property
    def total_distance(self) -> int:
        return sum(step.distance for step in self.steps)

    def is_in_bounds(self, pos: Tuple[int, int]) -> bool:
        x, y = pos
        return (self.min_pos.x <= x < self.max_pos.x
                and self.min_pos.y <= y < self.max_pos.y)

    def to_string(self) -> str:
        """Serialize back into the wire grammar."""
        bounds = FIELD_SEPARATOR.join(str(v) for v in (
            self.min_pos.x, self.max_pos.x, self.min_pos.y, self.max_pos.y))
        start = f"{self.start_pos.x}{FIELD_SEPARATOR}{self.start_pos.y}"
        steps = FIELD_SEPARATOR.join(str(step) for step in self.steps)
        return SECTION_SEPARATOR.join([
            f"{MAP_PREFIX}{bounds}",
            f"{START_PREFIX}{start}",
            f"{STEPS_OPEN}{steps}{STEPS_CLOSE}",
        ])

    def __str__(self) -> str:
        steps = ", ".join(str(step) for step in self.steps)
        return (f"MinPos={self.min_pos}, MaxPos={self.max_pos}, "
                f"StartPos={self.start_pos}, Steps=[{steps}]")


# =============================================================================
# COMMAND PARSER
# =============================================================================
def _parse_int(text: str, field: str) -> int:
    stripped = text.strip()
    if not _INT_RE.fullmatch(stripped):
        raise IntegerFormatError(text, field)
    return int(stripped)


def _parse_map(section: str) -> Tuple[Position, Position]:
    fields = section[len(MAP_PREFIX):].split(FIELD_SEPARATOR)
    if len(fields) != 4:
        raise MapFormatError(section)
    min_x, max_x, min_y, max_y = (
        _parse_int(value, name)
        for value, name in zip(fields, ("minX", "maxX", "minY", "maxY"))
    )
    return Position(min_x, min_y), Position(max_x, max_y)


def _parse_start(section: str) -> Position:
    fields = section[len(START_PREFIX):].split(FIELD_SEPARATOR)
    if len(fields) != 2:
        raise StartFormatError(section)
    return Position(_parse_int(fields[0], "startX"), _parse_int(fields[1], "startY"))


def _parse_step(token: str) -> Step:
    direction = Direction.from_letter(token[:1])
    if direction is None:
        raise StepFormatError(token)
    distance = _parse_int(token[1:], f"distance of step '{token}'")
    if distance <= 0:
        raise StepFormatError(token, "distance must be positive")
    return Step(direction, distance)


def _parse_steps(section: str) -> Tuple[Step, ...]:
    body = section[len(STEPS_OPEN):-len(STEPS_CLOSE)]
    if not body.strip():
        return ()
    return tuple(_parse_step(token) for token in body.split(FIELD_SEPARATOR))


def parse_command(command: str) -> Command:
    """Parse ``M:<minX>,<maxX>,<minY>,<maxY>;S:<x>,<y>;[<step>,...]``.

    Sections may come in any order; each one is recognised by its prefix.
    Raises a ``CommandParseError`` subclass on the first problem found.
    """
    sections = command.split(SECTION_SEPARATOR)
    if len(sections) != 3:
        raise SectionCountError(command, len(sections))

    bounds: Optional[Tuple[Position, Position]] = None
    start: Optional[Position] = None
    steps: Optional[Tuple[Step, ...]] = None

    for section in sections:
        if section.startswith(MAP_PREFIX):
            bounds = _parse_map(section)
        elif section.startswith(START_PREFIX):
            start = _parse_start(section)
        elif section.startswith(STEPS_OPEN) and section.endswith(STEPS_CLOSE):
            steps = _parse_steps(section)
        else:
            raise UnknownSectionError(section)

    missing: List[str] = []
    if bounds is None:
        missing.append("map")
    if start is None:
        missing.append("start")
    if steps is None:
        missing.append("steps")
    if missing:
        raise MissingSectionError(command, missing)

    min_pos, max_pos = bounds
    parsed = Command(min_pos, max_pos, start, steps)
    logger.debug(f"Parsed command '{command}' -> {parsed}")
    return parsed
