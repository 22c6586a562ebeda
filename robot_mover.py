import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from robot_command import Command, Position, parse_command
from robot_planner import StepCursor, format_plan_report, is_in_bounds, traverse
from robot_tiles import TileMap

logger = logging.getLogger("robo_grid")

# =============================================================================
# CONFIGURATION & CONSTANTS
# =============================================================================
DEBUG_ENABLED = False


# =============================================================================
# DATA STRUCTURES
# =============================================================================
class MoveStatus(Enum):
    IDLE = "idle"
    MOVING = "moving"
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass
class RobotState:
    """Current robot state on the grid"""
    x: int = 0
    y: int = 0
    ticks: int = 0

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)


# =============================================================================
# GRID MOVER
# =============================================================================
class GridMover:
    """Drives a command one unit move per tick and cleans the tiles it visits.

    Every candidate position is checked with ``is_in_bounds`` before the robot
    commits to it; on the first violation the command is dropped.
    """

    def __init__(self):
        self.command: Optional[Command] = None
        self.cursor: Optional[StepCursor] = None
        self.tile_map: Optional[TileMap] = None
        self.robot_state = RobotState()
        self.traveled_path: List[Position] = []
        self.status = MoveStatus.IDLE

    def debug_print(self, msg: str):
        if DEBUG_ENABLED:
            logger.debug(msg)

    def activate(self, command: Union[Command, str]) -> MoveStatus:
        if isinstance(command, str):
            command = parse_command(command)

        logger.info(str(command))
        self.command = command
        self.cursor = StepCursor(command)
        self.tile_map = TileMap(command.min_pos, command.max_pos)

        for line in format_plan_report(traverse(command)):
            logger.info(line)

        start = command.start_pos
        self.robot_state = RobotState(start.x, start.y)
        if not is_in_bounds(command, start):
            logger.info(f"Unable to start. Start position {start} is outside the map.")
            self.traveled_path = []
            return self._stop(MoveStatus.ABORTED)

        self.traveled_path = [start]
        self.status = MoveStatus.MOVING
        return self.status

    def _stop(self, status: MoveStatus) -> MoveStatus:
        self.command = None
        self.cursor = None
        self.status = status
        return status

    def tick(self) -> MoveStatus:
        if self.command is None:
            return MoveStatus.IDLE

        current = self.robot_state.position
        self.tile_map.clean(current)
        self.robot_state.ticks += 1

        direction = self.cursor.next_direction()
        if direction is None:
            logger.info("Target reached")
            return self._stop(MoveStatus.COMPLETED)

        target = current.moved(direction)
        if not is_in_bounds(self.command, target):
            logger.info(f"Unable to reach target. Target is outside the map. (currentPos={current})")
            return self._stop(MoveStatus.ABORTED)

        self.robot_state.x, self.robot_state.y = target
        self.traveled_path.append(target)
        self.debug_print(f"T{self.robot_state.ticks}: {direction.name} -> {target}")
        return MoveStatus.MOVING

    def run(self, max_ticks: Optional[int] = None) -> MoveStatus:
        """Tick until the command completes or aborts (or max_ticks runs out)"""
        status = self.status
        ticks = 0
        while status == MoveStatus.MOVING:
            if max_ticks is not None and ticks >= max_ticks:
                break
            status = self.tick()
            ticks += 1
        return status
