"""Insertion dans une voie 1-D ordonnée côté entrée.

La voie est une séquence mutable de cellules (0 = vide, 1 = occupée) dont
l'index 0 est la cellule la plus proche du bord d'entrée.
"""

from __future__ import annotations

from typing import MutableSequence, Optional

from edgedrop.engine.errors import NoSpace


def _first_occupied(lane: MutableSequence[int]) -> Optional[int]:
    for index, cell in enumerate(lane):
        if cell:
            return index
    return None


def landing_index(lane: MutableSequence[int]) -> int:
    """Calcule l'index d'arrivée d'une tuile sans modifier la voie.

    - voie vide : la tuile glisse jusqu'au mur opposé (dernier index)
    - sinon, premier trou au-delà du premier obstacle `k`
    - sinon `k - 1`, juste devant la pile
    - `NoSpace` si la pile touche déjà le bord d'entrée

    Les piles « flottantes » au-dessus d'un trou laissé par un effacement ne
    sont pas tassées.
    """

    first = _first_occupied(lane)
    if first is None:
        return len(lane) - 1

    for index in range(first, len(lane)):
        if not lane[index]:
            return index

    if first == 0:
        raise NoSpace()
    return first - 1


def insert(lane: MutableSequence[int]) -> int:
    """Pose une tuile dans la voie et retourne son index."""

    index = landing_index(lane)
    lane[index] = 1
    return index


__all__ = ["landing_index", "insert"]
