"""Adressage du périmètre : emplacement linéaire -> bord + voie.

Les emplacements sont numérotés dans le sens horaire depuis le coin
haut-gauche :
- `[0, N)`   : bord haut, de gauche à droite
- `[N, 2N)`  : bord droit, de haut en bas
- `[2N, 3N)` : bord bas, de droite à gauche
- `[3N, 4N)` : bord gauche, de bas en haut
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from edgedrop.engine.errors import InvalidPlacementLocation

Cell = Tuple[int, int]  # (col, row)


class Edge(Enum):
    """Bord d'entrée d'une tuile."""

    TOP = "TOP"
    RIGHT = "RIGHT"
    BOTTOM = "BOTTOM"
    LEFT = "LEFT"

    @property
    def is_vertical(self) -> bool:
        """True si la tuile circule dans une colonne (entrée haut/bas)."""

        return self in (Edge.TOP, Edge.BOTTOM)


_EDGE_ORDER: Tuple[Edge, ...] = (Edge.TOP, Edge.RIGHT, Edge.BOTTOM, Edge.LEFT)


def classify(n: int, slot: int) -> Edge:
    """Retourne le bord d'un emplacement par soustractions successives."""

    if slot < 0:
        raise InvalidPlacementLocation(slot)
    remaining = slot
    for edge in _EDGE_ORDER:
        if remaining < n:
            return edge
        remaining -= n
    raise InvalidPlacementLocation(slot)


def edge_base(n: int, edge: Edge) -> int:
    """Premier emplacement du bord."""

    return _EDGE_ORDER.index(edge) * n


def lane_index(n: int, slot: int) -> int:
    """Index de la ligne/colonne traversée par une tuile posée en `slot`.

    Bas et gauche sont miroités pour rester en coordonnées plateau
    (colonne depuis la gauche, ligne depuis le haut).
    """

    edge = classify(n, slot)
    lane = slot - edge_base(n, edge)
    if edge in (Edge.BOTTOM, Edge.LEFT):
        lane = n - 1 - lane
    return lane


def cell_for(n: int, edge: Edge, lane: int, depth: int) -> Cell:
    """Convertit une profondeur dans la voie (0 = côté entrée) en `(col, row)`."""

    far = n - 1 - depth
    if edge is Edge.TOP:
        return (lane, depth)
    if edge is Edge.BOTTOM:
        return (lane, far)
    if edge is Edge.LEFT:
        return (depth, lane)
    return (far, lane)


__all__ = ["Cell", "Edge", "classify", "edge_base", "lane_index", "cell_for"]
