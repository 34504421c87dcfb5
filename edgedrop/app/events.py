"""Évènements publiés par la couche application (`edgedrop.app`)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from edgedrop.engine.perimeter import Cell, Edge


@dataclass(frozen=True)
class SessionStartedEvent:
    """Émis à la création de la session et à chaque redémarrage."""

    size: int


@dataclass(frozen=True)
class TilePlacedEvent:
    """Émis après une pose réussie, avant tout effacement de ligne."""

    slot: int
    edge: Edge
    position: Cell
    points: int


@dataclass(frozen=True)
class LinesClearedEvent:
    """Émis quand une pose complète une ou plusieurs lignes."""

    rows: Tuple[int, ...]
    cols: Tuple[int, ...]
    points: int

    @property
    def count(self) -> int:
        return len(self.rows) + len(self.cols)


@dataclass(frozen=True)
class RankChangedEvent:
    """Émis quand le rang monte (score) ou descend (boost)."""

    previous: int
    current: int


@dataclass(frozen=True)
class RankBoostEvent:
    multiplier: float
    duration: float


@dataclass(frozen=True)
class BoardRotatedEvent:
    """`direction` vaut +1 (horaire) ou -1 (anti-horaire)."""

    direction: int
    rotation: int


@dataclass(frozen=True)
class GameOverEvent:
    """Émis quand la voie choisie n'a plus de place."""

    slot: int
    score: int
    rank: int


__all__ = [
    "SessionStartedEvent",
    "TilePlacedEvent",
    "LinesClearedEvent",
    "RankChangedEvent",
    "RankBoostEvent",
    "BoardRotatedEvent",
    "GameOverEvent",
]
