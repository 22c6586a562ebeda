import numpy as np
from typing import Tuple

from robot_command import Position


class TileMap:
    """Dirty/clean state of every tile inside half-open grid bounds"""

    def __init__(self, min_pos: Tuple[int, int], max_pos: Tuple[int, int]):
        self.min_pos = Position(*min_pos)
        self.max_pos = Position(*max_pos)
        width = max(0, self.max_pos.x - self.min_pos.x)
        height = max(0, self.max_pos.y - self.min_pos.y)
        self.tiles = np.zeros((width, height), dtype=bool)

    def _index(self, pos: Tuple[int, int]) -> Tuple[int, int]:
        x, y = pos
        i, j = x - self.min_pos.x, y - self.min_pos.y
        if not (0 <= i < self.tiles.shape[0] and 0 <= j < self.tiles.shape[1]):
            raise ValueError(f"Tile ({x}, {y}) is outside the map")
        return i, j

    def clean(self, pos: Tuple[int, int]):
        self.tiles[self._index(pos)] = True

    def is_clean(self, pos: Tuple[int, int]) -> bool:
        return bool(self.tiles[self._index(pos)])

    def reset(self):
        self.tiles[:] = False

    @property
    def total(self) -> int:
        return int(self.tiles.size)

    @property
    def cleaned_count(self) -> int:
        return int(np.count_nonzero(self.tiles))

    @property
    def dirty_count(self) -> int:
        return self.total - self.cleaned_count

    def coverage(self) -> float:
        if self.total == 0:
            return 0.0
        return self.cleaned_count / self.total
