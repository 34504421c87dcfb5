"""Tests pour la grille: pose, effacement, rotation et projection d'affichage."""

from __future__ import annotations

import numpy as np
import pytest

from edgedrop.engine.errors import InvalidPlacementLocation, NoSpace
from edgedrop.engine.grid import Grid, rotate_left
from edgedrop.engine.perimeter import Edge


def _rows(grid: Grid) -> list[list[int]]:
    return grid.board().tolist()


class TestConstruction:
    def test_fresh_grid_is_empty(self):
        grid = Grid(4)
        assert grid.size == 4
        assert grid.slot_count == 16
        assert grid.rotation == 0
        assert not grid.board().any()

    @pytest.mark.parametrize("n", [0, 1, -3])
    def test_too_small_board_is_rejected(self, n):
        with pytest.raises(ValueError):
            Grid(n)

    def test_non_integer_size_is_rejected(self):
        with pytest.raises(ValueError):
            Grid(3.0)  # type: ignore[arg-type]


class TestPlace:
    def test_place_top_slides_to_bottom(self):
        grid = Grid(3)
        placement = grid.place(0)
        assert placement.position == (0, 2)
        assert placement.edge is Edge.TOP
        assert _rows(grid) == [[0, 0, 0], [0, 0, 0], [1, 0, 0]]

    def test_place_right(self):
        grid = Grid(3)
        assert grid.place(3).position == (0, 0)
        assert _rows(grid) == [[1, 0, 0], [0, 0, 0], [0, 0, 0]]

    def test_place_bottom(self):
        grid = Grid(3)
        assert grid.place(8).position == (0, 0)
        assert _rows(grid) == [[1, 0, 0], [0, 0, 0], [0, 0, 0]]

    def test_place_left(self):
        grid = Grid(3)
        assert grid.place(11).position == (2, 0)
        assert _rows(grid) == [[0, 0, 1], [0, 0, 0], [0, 0, 0]]

    def test_returned_position_is_occupied(self):
        grid = Grid(5)
        for slot in (0, 7, 12, 19, 4):
            col, row = grid.place(slot).position
            assert grid.is_occupied(col, row)

    def test_stacking_from_top_and_right(self):
        grid = Grid(3)
        assert grid.place(0).position == (0, 2)
        assert grid.place(0).position == (0, 1)
        assert grid.place(4).position == (1, 1)
        assert _rows(grid) == [[0, 0, 0], [1, 1, 0], [1, 0, 0]]

    def test_stack_reaching_entry_edge_reports_no_space(self):
        grid = Grid(3)
        for _ in range(3):
            grid.place(1)
        with pytest.raises(NoSpace):
            grid.place(1)
        assert _rows(grid) == [[0, 1, 0], [0, 1, 0], [0, 1, 0]]

    def test_tile_passes_obstruction_into_hole(self):
        grid = Grid(3)
        assert grid.place(10).position == (2, 1)
        # Colonne 2 depuis le bas: vide, occupé, vide -> la tuile atteint la ligne 0
        assert grid.place(6).position == (2, 0)
        assert _rows(grid) == [[0, 0, 1], [0, 0, 1], [0, 0, 0]]
        assert grid.place(6).position == (2, 2)
        with pytest.raises(NoSpace):
            grid.place(6)

    def test_no_space_leaves_board_untouched(self):
        grid = Grid(2)
        grid.place(0)
        grid.place(0)
        before = grid.board()
        with pytest.raises(NoSpace):
            grid.place(0)
        np.testing.assert_array_equal(grid.board(), before)

    @pytest.mark.parametrize("slot", [12, 13, 100, -1])
    def test_invalid_slot(self, slot):
        grid = Grid(3)
        with pytest.raises(InvalidPlacementLocation):
            grid.place(slot)


class TestClearing:
    def test_clearing_disabled_keeps_full_lines(self):
        grid = Grid(3)
        for _ in range(3):
            placement = grid.place(0)
        assert placement.total_cleared == 0
        assert _rows(grid) == [[1, 0, 0], [1, 0, 0], [1, 0, 0]]

    def test_full_entered_column_is_cleared(self):
        grid = Grid(3, clearing=True)
        grid.place(0)
        grid.place(0)
        placement = grid.place(0)
        assert placement.cleared_cols == (0,)
        assert placement.cleared_rows == ()
        assert not grid.board().any()

    def test_row_and_column_counted_before_clearing(self):
        grid = Grid(3, clearing=True)
        grid.place(0)
        grid.place(0)
        grid.place(11)
        grid.place(11)
        assert _rows(grid) == [[0, 1, 1], [1, 0, 0], [1, 0, 0]]

        placement = grid.place(0)

        assert placement.position == (0, 0)
        assert placement.cleared_cols == (0,)
        assert placement.cleared_rows == (0,)
        assert placement.total_cleared == 2
        assert _rows(grid) == [[0, 0, 0], [0, 0, 0], [0, 0, 0]]

    def test_horizontal_entry_checks_every_column(self):
        grid = Grid(2, clearing=True)
        assert grid.place(7).position == (1, 0)
        placement = grid.place(6)
        assert placement.edge is Edge.LEFT
        assert placement.position == (1, 1)
        # La ligne entrée n'est pas pleine, mais la colonne 1 l'est
        assert placement.cleared_rows == ()
        assert placement.cleared_cols == (1,)
        assert not grid.board().any()

    def test_vertical_entry_checks_every_row(self):
        grid = Grid(2, clearing=True)
        grid.place(0)
        placement = grid.place(1)
        assert placement.cleared_rows == (1,)
        assert placement.cleared_cols == ()
        assert not grid.board().any()


class TestRotation:
    def _three_tiles(self) -> Grid:
        grid = Grid(3)
        grid.place(1)
        grid.place(2)
        grid.place(3)
        assert _rows(grid) == [[1, 0, 0], [0, 0, 0], [0, 1, 1]]
        return grid

    def test_rotate_right(self):
        grid = self._three_tiles()
        grid.rotate_right()
        assert _rows(grid) == [[0, 0, 1], [1, 0, 0], [1, 0, 0]]
        assert grid.rotation == 1

    def test_rotate_left(self):
        grid = self._three_tiles()
        grid.rotate_left()
        assert _rows(grid) == [[0, 0, 1], [0, 0, 1], [1, 0, 0]]
        assert grid.rotation == -1

    def test_rotate_right_large_board(self):
        grid = Grid(5)
        for slot in (1, 2, 3, 3):
            grid.place(slot)
        assert _rows(grid) == [
            [0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0],
            [0, 0, 0, 1, 0],
            [0, 1, 1, 1, 0],
        ]
        grid.rotate_right()
        assert _rows(grid) == [
            [0, 0, 0, 0, 0],
            [1, 0, 0, 0, 0],
            [1, 0, 0, 0, 0],
            [1, 1, 0, 0, 0],
            [0, 0, 0, 0, 0],
        ]

    def test_four_quarter_turns_are_identity(self):
        grid = self._three_tiles()
        before = grid.board()
        for _ in range(4):
            grid.rotate_right()
        np.testing.assert_array_equal(grid.board(), before)
        for _ in range(4):
            grid.rotate_left()
        np.testing.assert_array_equal(grid.board(), before)
        assert grid.rotation == 0

    def test_rotation_offset_never_wraps(self):
        grid = Grid(3)
        for _ in range(9):
            grid.rotate_right()
        assert grid.rotation == 9
        for _ in range(14):
            grid.rotate_left()
        assert grid.rotation == -5

    def test_rotation_changes_future_placements(self):
        grid = Grid(3)
        grid.place(0)
        grid.rotate_right()
        # La tuile (0, 2) est maintenant en (0, 0) : la suivante se loge juste derrière
        assert grid.place(0).position == (0, 1)
        assert _rows(grid) == [[1, 0, 0], [1, 0, 0], [0, 0, 0]]


class TestDisplayBoard:
    def test_display_matches_board_without_rotation(self):
        grid = Grid(3)
        grid.place(0)
        np.testing.assert_array_equal(grid.display_board(), grid.board())

    def test_display_is_stable_across_rotations(self):
        grid = Grid(3)
        grid.place(0)
        upright = grid.board()

        for i in range(-10, 20):
            if i < 0:
                grid.rotate_left()
            else:
                grid.rotate_right()
            np.testing.assert_array_equal(grid.display_board(), upright)

    def test_display_tracks_placements_after_rotation(self):
        grid = Grid(4)
        grid.place(5)
        grid.rotate_right()
        grid.place(0)
        # Affichage = plateau logique ramené à rotation nette nulle
        np.testing.assert_array_equal(grid.display_board(), rotate_left(grid.board()))
        grid.rotate_left()
        np.testing.assert_array_equal(grid.display_board(), grid.board())

    def test_display_board_is_a_copy(self):
        grid = Grid(3)
        display = grid.display_board()
        display[0, 0] = 1
        assert not grid.display_board().any()
        board = grid.board()
        board[0, 0] = 1
        assert not grid.board().any()
