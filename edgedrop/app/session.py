"""Session de jeu EdgeDrop.

`GameSession` possède la grille et le moteur de score, et expose les seules
commandes mutantes utilisées par le reste de l'application (pose, rotation,
tick, boost, redémarrage) ainsi que des lectures en copie.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from edgedrop.app.event_bus import EventBus
from edgedrop.app.events import (
    BoardRotatedEvent,
    GameOverEvent,
    LinesClearedEvent,
    RankBoostEvent,
    RankChangedEvent,
    SessionStartedEvent,
    TilePlacedEvent,
)
from edgedrop.engine.errors import NoSpace
from edgedrop.engine.grid import Grid
from edgedrop.engine.perimeter import Cell
from edgedrop.engine.rules import BASE_DROP_POINTS, DEFAULT_BOARD_SIZE
from edgedrop.engine.score import ScoreEngine
from edgedrop.engine.snapshot import BoostSnapshot, SessionSnapshot, freeze_board
from edgedrop.engine.targeting import clamp_offset, resolve_drop

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Mode de la session."""

    PLAYING = "PLAYING"
    GAME_OVER = "GAME_OVER"


class GameSession:
    """Compose Grid + ScoreEngine et publie les évènements de partie."""

    def __init__(
        self,
        n: int = DEFAULT_BOARD_SIZE,
        *,
        seed: int | None = None,
        clearing: bool = True,
        event_bus: EventBus | None = None,
    ) -> None:
        self._event_bus = event_bus if event_bus is not None else EventBus()
        self._rng = random.Random(seed)
        self._clearing = clearing
        self._start(n)

    def _start(self, n: int) -> None:
        # Grille et score sont remplacés ensemble, jamais séparément
        grid = Grid(n, clearing=self._clearing)
        score = ScoreEngine()
        self._grid, self._score = grid, score
        self._history: List[int] = []
        self._offset = 0
        self._next_slot = self._random_slot()
        self._mode = Mode.PLAYING
        self._enable_input = True
        logger.info("Nouvelle partie %dx%d", n, n)
        self._event_bus.publish(SessionStartedEvent(size=n))

    def _random_slot(self) -> int:
        return self._rng.randrange(self._grid.slot_count)

    # ------------------------------------------------------------------
    # Lectures
    # ------------------------------------------------------------------

    @property
    def event_bus(self) -> EventBus:
        """Retourne le bus d'évènements utilisé par la session."""

        return self._event_bus

    @property
    def size(self) -> int:
        return self._grid.size

    @property
    def rotation(self) -> int:
        return self._grid.rotation

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def enable_input(self) -> bool:
        return self._enable_input

    @property
    def score(self) -> int:
        return self._score.score

    @property
    def rank(self) -> int:
        return self._score.rank

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def next_slot(self) -> int:
        """Emplacement utilisé à la prochaine pose en l'absence de décalage."""

        return self._next_slot

    @next_slot.setter
    def next_slot(self, slot: int) -> None:
        if not 0 <= slot < self._grid.slot_count:
            raise ValueError(f"Emplacement hors périmètre: {slot}")
        self._next_slot = slot

    @property
    def placement_history(self) -> Tuple[int, ...]:
        return tuple(self._history)

    def board(self) -> np.ndarray:
        return self._grid.board()

    def display_board(self) -> np.ndarray:
        return self._grid.display_board()

    def percent_to_next_rank(self) -> float:
        return self._score.percent_to_next_rank()

    def current_multiplier(self) -> float:
        return self._score.current_multiplier()

    def drop(self) -> int:
        """Aperçu de l'emplacement effectif de la prochaine pose."""

        return resolve_drop(self._grid.size, self._next_slot, self._offset)

    def snapshot(self) -> SessionSnapshot:
        boost = self._score.active_boost
        return SessionSnapshot(
            size=self._grid.size,
            board=freeze_board(self._grid.board()),
            display_board=freeze_board(self._grid.display_board()),
            rotation=self._grid.rotation,
            score=self._score.score,
            rank=self._score.rank,
            percent_to_next_rank=self._score.percent_to_next_rank(),
            current_multiplier=self._score.current_multiplier(),
            drop_bonus=self._score.drop_bonus(),
            combo_multiplier=self._score.combo_multiplier,
            rank_boost=(
                None
                if boost is None
                else BoostSnapshot(boost.multiplier, boost.remaining_time, boost.total_time)
            ),
            mode=self._mode.value,
            enable_input=self._enable_input,
            next_slot=self._next_slot,
            offset=self._offset,
            drop=self.drop(),
            placement_history=tuple(self._history),
        )

    # ------------------------------------------------------------------
    # Commandes
    # ------------------------------------------------------------------

    def place(self) -> Optional[Cell]:
        """Pose une tuile à `drop()` et retourne sa position `(col, row)`.

        Retourne None si les entrées sont désactivées ou si la voie est pleine
        (la partie passe alors en GAME_OVER). `InvalidPlacementLocation` n'est
        pas interceptée : elle signale un défaut interne.
        """

        if not self._enable_input:
            return None

        slot = self.drop()
        previous_rank = self._score.rank
        try:
            placement = self._grid.place(slot)
        except NoSpace:
            self._mode = Mode.GAME_OVER
            self._enable_input = False
            logger.info("Partie terminée en %d (score %d, rang %d)", slot, self.score, self.rank)
            self._event_bus.publish(
                GameOverEvent(slot=slot, score=self._score.score, rank=self._score.rank)
            )
            return None

        self._history.append(slot)

        # L'état est entièrement mis à jour avant toute diffusion
        events: List[object] = []
        cleared = placement.total_cleared
        if cleared:
            self._score.add_mult(cleared)
        points = self._score.add_score(BASE_DROP_POINTS)
        events.append(
            TilePlacedEvent(slot=slot, edge=placement.edge, position=placement.position, points=points)
        )

        if cleared:
            bonus = self._score.add_score(cleared * self._grid.size)
            events.append(
                LinesClearedEvent(rows=placement.cleared_rows, cols=placement.cleared_cols, points=bonus)
            )

        self._score.reset_drop_timer()

        if self._score.rank != previous_rank:
            events.append(RankChangedEvent(previous=previous_rank, current=self._score.rank))

        self._next_slot = self._random_slot()
        self._offset = 0

        self._event_bus.publish_all(events)
        return placement.position

    def rotate_right(self) -> bool:
        if not self._enable_input:
            return False
        self._grid.rotate_right()
        self._event_bus.publish(BoardRotatedEvent(direction=1, rotation=self._grid.rotation))
        return True

    def rotate_left(self) -> bool:
        if not self._enable_input:
            return False
        self._grid.rotate_left()
        self._event_bus.publish(BoardRotatedEvent(direction=-1, rotation=self._grid.rotation))
        return True

    def tick(self, dt: float) -> None:
        """Avance le temps réel de `dt` secondes."""

        self._score.tick(dt)

    def nudge_offset(self, delta: int) -> int:
        """Décale la prochaine pose de ±1, borné à {-1, 0, 1}."""

        if delta not in (-1, 1):
            raise ValueError(f"Décalage invalide: {delta}")
        if self._enable_input:
            self._offset = clamp_offset(self._offset + delta)
        return self._offset

    def rank_boost(self) -> bool:
        if not self._enable_input:
            return False
        previous_rank = self._score.rank
        if not self._score.rank_boost():
            return False
        boost = self._score.active_boost
        if boost is None:
            raise RuntimeError("Boost de rang accepté mais inactif")
        self._event_bus.publish_all([
            RankBoostEvent(multiplier=boost.multiplier, duration=boost.total_time),
            RankChangedEvent(previous=previous_rank, current=self._score.rank),
        ])
        return True

    def restart(self) -> None:
        """Reconstruit grille et score de même taille après une fin de partie.

        Raises:
            RuntimeError: si la partie n'est pas en GAME_OVER
        """

        if self._mode is not Mode.GAME_OVER:
            raise RuntimeError("restart() n'est possible qu'en GAME_OVER")
        self._start(self._grid.size)


__all__ = ["GameSession", "Mode"]
