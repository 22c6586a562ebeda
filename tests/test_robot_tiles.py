import numpy as np
import pytest

from robot_tiles import TileMap


def test_new_map_is_all_dirty():
    tiles = TileMap((-2, 0), (2, 3))
    assert tiles.tiles.shape == (4, 3)
    assert tiles.total == 12
    assert tiles.cleaned_count == 0
    assert tiles.dirty_count == 12
    assert tiles.coverage() == 0.0


def test_clean_uses_grid_coordinates():
    tiles = TileMap((-2, 0), (2, 3))
    tiles.clean((-2, 0))
    tiles.clean((1, 2))
    tiles.clean((1, 2))
    assert tiles.is_clean((-2, 0))
    assert tiles.is_clean((1, 2))
    assert not tiles.is_clean((0, 1))
    assert tiles.cleaned_count == 2
    assert tiles.tiles[0, 0] and tiles.tiles[3, 2]
    assert tiles.coverage() == pytest.approx(2 / 12)


@pytest.mark.parametrize("pos", [(2, 0), (-3, 0), (0, 3), (0, -1)])
def test_outside_tile_raises(pos):
    tiles = TileMap((-2, 0), (2, 3))
    with pytest.raises(ValueError, match="outside the map"):
        tiles.clean(pos)


def test_reset():
    tiles = TileMap((0, 0), (2, 2))
    tiles.clean((0, 0))
    tiles.clean((1, 1))
    tiles.reset()
    assert not np.any(tiles.tiles)


def test_inverted_bounds_give_empty_map():
    tiles = TileMap((5, 5), (0, 0))
    assert tiles.total == 0
    assert tiles.coverage() == 0.0
    with pytest.raises(ValueError):
        tiles.is_clean((1, 1))
