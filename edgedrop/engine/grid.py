"""Grille carrée NxN et logique de pose.

Cette implémentation expose:
- la pose depuis un emplacement du périmètre (glissement jusqu'à obstacle)
- la détection et l'effacement des lignes/colonnes pleines
- la rotation logique du plateau par quarts de tour
- une projection d'affichage insensible aux rotations
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from edgedrop.engine import insertion
from edgedrop.engine.perimeter import Cell, Edge, cell_for, classify, lane_index
from edgedrop.engine.rules import MIN_BOARD_SIZE

logger = logging.getLogger(__name__)

EMPTY: int = 0
OCCUPIED: int = 1


@dataclass(frozen=True)
class Placement:
    """Résultat d'une pose réussie."""

    slot: int
    edge: Edge
    position: Cell  # (col, row)
    cleared_rows: Tuple[int, ...] = ()
    cleared_cols: Tuple[int, ...] = ()

    @property
    def total_cleared(self) -> int:
        return len(self.cleared_rows) + len(self.cleared_cols)


def rotate_right(board: np.ndarray) -> np.ndarray:
    """Quart de tour horaire (transposée puis miroir des colonnes)."""

    return np.fliplr(board.T).copy()


def rotate_left(board: np.ndarray) -> np.ndarray:
    """Quart de tour anti-horaire (miroir des colonnes puis transposée)."""

    return np.fliplr(board).T.copy()


def unrotate(board: np.ndarray, rotation: int) -> np.ndarray:
    """Annule `rotation` quarts de tour horaires (positif) ou anti-horaires (négatif)."""

    # np.rot90 tourne dans le sens anti-horaire pour k > 0
    return np.rot90(board, k=rotation).copy()


class Grid:
    """Plateau logique NxN (`board[row, col]`, 1 = occupé)."""

    def __init__(self, n: int, *, clearing: bool = False) -> None:
        if not isinstance(n, int) or isinstance(n, bool):
            raise ValueError(f"Taille de plateau invalide: {n!r}")
        if n < MIN_BOARD_SIZE:
            raise ValueError(f"Le plateau doit faire au moins {MIN_BOARD_SIZE}x{MIN_BOARD_SIZE} (reçu {n})")
        self._n = n
        self._board: np.ndarray = np.zeros((n, n), dtype=np.uint8)
        self._rotation: int = 0
        self.clearing = clearing

    # -- API lecture --
    @property
    def size(self) -> int:
        return self._n

    @property
    def slot_count(self) -> int:
        return 4 * self._n

    @property
    def rotation(self) -> int:
        """Quarts de tour cumulés depuis la construction (positif = horaire)."""

        return self._rotation

    def board(self) -> np.ndarray:
        """Copie du plateau logique, rotations incluses."""

        return self._board.copy()

    def display_board(self) -> np.ndarray:
        """Plateau tel qu'il apparaît sans rotation nette appliquée."""

        return unrotate(self._board, self._rotation)

    def is_occupied(self, col: int, row: int) -> bool:
        return bool(self._board[row, col])

    # -- Pose --
    def place(self, slot: int) -> Placement:
        """Pose une tuile depuis `slot` et efface les lignes pleines si activé.

        Raises:
            InvalidPlacementLocation: slot hors de `[0, 4N)`
            NoSpace: la voie est pleine depuis ce bord
        """

        edge = classify(self._n, slot)
        lane = lane_index(self._n, slot)
        data = self._lane(edge, lane)

        depth = insertion.insert(data)
        col, row = cell_for(self._n, edge, lane, depth)
        self._board[row, col] = OCCUPIED
        logger.debug("Pose en %d (%s, voie %d) -> (%d, %d)", slot, edge.value, lane, col, row)

        rows: Tuple[int, ...] = ()
        cols: Tuple[int, ...] = ()
        if self.clearing:
            rows, cols = self._clear_full_lines(edge, lane)

        return Placement(slot=slot, edge=edge, position=(col, row), cleared_rows=rows, cleared_cols=cols)

    def _lane(self, edge: Edge, lane: int) -> List[int]:
        """Copie de la voie, ordonnée depuis le bord d'entrée."""

        if edge is Edge.TOP:
            values = self._board[:, lane]
        elif edge is Edge.BOTTOM:
            values = self._board[::-1, lane]
        elif edge is Edge.LEFT:
            values = self._board[lane, :]
        else:
            values = self._board[lane, ::-1]
        return [int(v) for v in values]

    def _full_rows(self) -> List[int]:
        return [int(r) for r in np.flatnonzero(self._board.all(axis=1))]

    def _full_cols(self) -> List[int]:
        return [int(c) for c in np.flatnonzero(self._board.all(axis=0))]

    def _clear_full_lines(self, edge: Edge, lane: int) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
        """Compte la ligne entrée + les lignes orthogonales pleines, puis les vide."""

        rows: List[int] = []
        cols: List[int] = []
        if edge.is_vertical:
            if self._board[:, lane].all():
                cols.append(lane)
            rows.extend(self._full_rows())
        else:
            if self._board[lane, :].all():
                rows.append(lane)
            cols.extend(self._full_cols())

        # Comptage terminé avant tout effacement
        if rows:
            self._board[rows, :] = EMPTY
        if cols:
            self._board[:, cols] = EMPTY
        if rows or cols:
            logger.debug("Effacement lignes=%s colonnes=%s", rows, cols)
        return tuple(rows), tuple(cols)

    # -- Rotation --
    def rotate_right(self) -> None:
        """Tourne le plateau logique d'un quart de tour horaire."""

        self._board = rotate_right(self._board)
        self._rotation += 1

    def rotate_left(self) -> None:
        """Tourne le plateau logique d'un quart de tour anti-horaire."""

        self._board = rotate_left(self._board)
        self._rotation -= 1

    def __repr__(self) -> str:
        return f"Grid(n={self._n}, rotation={self._rotation}, board={self._board.tolist()})"


__all__ = ["Grid", "Placement", "EMPTY", "OCCUPIED", "rotate_right", "rotate_left", "unrotate"]
