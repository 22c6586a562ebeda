import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from robot_command import Command, Direction, Position

logger = logging.getLogger("robo_grid")

# =============================================================================
# CONFIGURATION & CONSTANTS
# =============================================================================
DEBUG_ENABLED = False


# =============================================================================
# BOUNDS
# =============================================================================
def is_in_bounds(command: Command, pos: Tuple[int, int]) -> bool:
    """Half-open bounds check shared by traversal, the mover and the tile map"""
    return command.is_in_bounds(pos)


# =============================================================================
# EAGER TRAVERSAL
# =============================================================================
@dataclass
class TraverseResult:
    in_bounds: bool
    path: List[Position] = field(default_factory=list)

    @property
    def exit_position(self) -> Optional[Position]:
        """First position outside the bounds, if the path leaves them"""
        if self.in_bounds or not self.path:
            return None
        return self.path[-1]

    def unique_positions(self) -> List[Position]:
        return list(dict.fromkeys(self.path))


def traverse(command: Command) -> TraverseResult:
    """Walk every step of the command without touching any cursor.

    The path starts at the start position and gains one entry per unit move.
    On the first position outside the bounds the walk stops and that position
    is the last entry of the path.
    """
    current = command.start_pos
    path = [current]
    if not is_in_bounds(command, current):
        return TraverseResult(False, path)

    for step in command.steps:
        for _ in range(step.distance):
            current = current.moved(step.direction)
            path.append(current)
            if not is_in_bounds(command, current):
                return TraverseResult(False, path)
    return TraverseResult(True, path)


def format_plan_report(result: TraverseResult) -> List[str]:
    """Human readable pre-flight summary of an eager traversal"""
    if result.in_bounds:
        visited = ", ".join(str(p) for p in result.unique_positions())
        return [
            "Path will remain in bounds.",
            f"Unique positions that will be visited: {visited}",
        ]
    visited = ", ".join(str(p) for p in result.path)
    return [
        f"Path will leave bounds at {result.exit_position}",
        f"Positions that will be visited: {visited}",
    ]


# =============================================================================
# LAZY STEP CURSOR
# =============================================================================
class StepCursor:
    """Yields one direction per call over a command's steps.

    The command itself is never modified; all progress lives here. Create a
    new cursor to start over.
    """

    def __init__(self, command: Command):
        self.command = command
        self.step_index = 0
        self.remaining = command.steps[0].distance if command.steps else 0

    @property
    def done(self) -> bool:
        return self.step_index >= len(self.command.steps)

    @property
    def remaining_distance(self) -> int:
        if self.done:
            return 0
        later = sum(s.distance for s in self.command.steps[self.step_index + 1:])
        return self.remaining + later

    def next_direction(self) -> Optional[Direction]:
        if self.done:
            return None

        direction = self.command.steps[self.step_index].direction
        self.remaining -= 1
        if self.remaining <= 0:
            self.step_index += 1
            if not self.done:
                self.remaining = self.command.steps[self.step_index].distance
        return direction


def next_direction(cursor: StepCursor) -> Optional[Direction]:
    return cursor.next_direction()


# =============================================================================
# PATH PLANNER
# =============================================================================
class GridPathPlanner:
    def __init__(self, command: Command):
        self.command = command
        self.result: Optional[TraverseResult] = None

    def debug_print(self, msg: str):
        if DEBUG_ENABLED:
            logger.debug(msg)

    def traverse(self) -> TraverseResult:
        self.debug_print(f"=== TRAVERSE: {self.command.to_string()} ===")
        self.result = traverse(self.command)
        for i, pos in enumerate(self.result.path):
            self.debug_print(f"P{i}: {pos}")
        self.debug_print(f"In bounds: {self.result.in_bounds}, positions: {len(self.result.path)}")
        return self.result

    def cursor(self) -> StepCursor:
        return StepCursor(self.command)

    def is_in_bounds(self, pos: Tuple[int, int]) -> bool:
        return is_in_bounds(self.command, pos)

    def unique_positions(self) -> List[Position]:
        if self.result is None:
            self.traverse()
        return self.result.unique_positions()

    def report(self) -> List[str]:
        if self.result is None:
            self.traverse()
        return format_plan_report(self.result)
