"""Exception types raised while reading robot command strings."""

from typing import List


class RobotCommandError(Exception):
    """Base class for robot command errors."""


class CommandParseError(RobotCommandError):
    """Raised when a command string does not match the command grammar."""

    def __init__(self, text: str, message: str):
        super().__init__(message)
        self.text = text


class SectionCountError(CommandParseError):
    def __init__(self, text: str, count: int):
        super().__init__(
            text,
            f"Invalid command format. Expected three sections but got {count}",
        )
        self.count = count


class MapFormatError(CommandParseError):
    def __init__(self, text: str):
        super().__init__(
            text, f"Invalid map format. Expected M:<minX>,<maxX>,<minY>,<maxY> but got '{text}'"
        )


class StartFormatError(CommandParseError):
    def __init__(self, text: str):
        super().__init__(
            text, f"Invalid start format. Expected S:<x>,<y> but got '{text}'"
        )


class StepFormatError(CommandParseError):
    def __init__(self, text: str, reason: str = "expected N, E, S or W followed by a distance"):
        super().__init__(text, f"Invalid step format '{text}': {reason}")
        self.reason = reason


class UnknownSectionError(CommandParseError):
    def __init__(self, text: str):
        super().__init__(text, f"Invalid command format. Unknown section {text}")


class IntegerFormatError(CommandParseError):
    def __init__(self, text: str, field: str):
        super().__init__(text, f"Invalid integer '{text}' for {field}")
        self.field = field


class MissingSectionError(CommandParseError):
    """Raised when the three sections do not include map, start and steps."""

    def __init__(self, text: str, missing: List[str]):
        super().__init__(
            text, f"Invalid command format. Missing section(s): {', '.join(missing)}"
        )
        self.missing = missing


__all__ = [
    "RobotCommandError",
    "CommandParseError",
    "SectionCountError",
    "MapFormatError",
    "StartFormatError",
    "StepFormatError",
    "UnknownSectionError",
    "IntegerFormatError",
    "MissingSectionError",
]
