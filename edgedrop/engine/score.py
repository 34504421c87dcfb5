"""Calcul du score, du rang et des multiplicateurs décroissants.

Formule d'un gain de points:

    delta = round(points * (bonus_chute + combo + boost_de_rang))

- bonus_chute : décroît linéairement de `DROP_BONUS_MAX` à 0 entre deux poses
- combo       : augmente de `lignes²` à chaque effacement, redescend vers 1
- boost       : multiplicateur temporaire obtenu en consommant un rang

Le temps est toujours injecté via `tick(dt)` ; aucune horloge n'est lue ici.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from edgedrop.engine.rules import (
    COMBO_DECAY_RATE,
    COMBO_FLOOR,
    DROP_BONUS_MAX,
    DROP_TIMER_SECONDS,
    RANK_BOOST_SECONDS_PER_RANK,
    rank_threshold,
)

logger = logging.getLogger(__name__)


class DropTimer:
    """Minuteur de réaction entre deux poses."""

    __slots__ = ("max_time", "max_bonus", "remaining")

    def __init__(self, max_time: float, max_bonus: float) -> None:
        self.max_time = max_time
        self.max_bonus = max_bonus
        self.remaining = max_time

    def pass_time(self, dt: float) -> float:
        self.remaining = max(self.remaining - dt, 0.0)
        return self.remaining

    def reset(self) -> None:
        self.remaining = self.max_time

    def bonus(self) -> float:
        """Interpolation linéaire de 0 (minuteur écoulé) à `max_bonus` (minuteur plein)."""

        if self.max_time <= 0:
            return 0.0
        return self.max_bonus * (self.remaining / self.max_time)


@dataclass
class RankBoost:
    """Boost de rang actif."""

    multiplier: float
    remaining_time: float
    total_time: float

    @property
    def progress(self) -> float:
        """Fraction du boost restante, de 1.0 à 0.0."""

        if self.total_time <= 0:
            return 0.0
        return self.remaining_time / self.total_time


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ScoreEngine:
    """Score, rang et modificateurs d'une partie."""

    def __init__(
        self,
        *,
        drop_timer_seconds: float = DROP_TIMER_SECONDS,
        drop_bonus_max: float = DROP_BONUS_MAX,
        combo_decay_rate: float = COMBO_DECAY_RATE,
        boost_seconds_per_rank: float = RANK_BOOST_SECONDS_PER_RANK,
    ) -> None:
        self.score: int = 0
        self.rank: int = 1
        self.rank_buffer: int = 0
        self.combo_multiplier: float = COMBO_FLOOR
        self.combo_decay_rate = combo_decay_rate
        self.boost_seconds_per_rank = boost_seconds_per_rank
        self.active_boost: Optional[RankBoost] = None
        self.drop_timer = DropTimer(drop_timer_seconds, drop_bonus_max)

    # -- Temps --
    def tick(self, dt: float) -> None:
        """Fait décroître boost, combo et minuteur de chute de `dt` secondes."""

        if dt < 0:
            raise ValueError(f"dt doit être positif ou nul (reçu {dt})")

        if self.active_boost is not None:
            boost = self.active_boost
            boost.remaining_time = max(boost.remaining_time - dt, 0.0)
            if boost.remaining_time <= 0.0:
                logger.info("Boost de rang x%s terminé", boost.multiplier)
                self.active_boost = None

        self.combo_multiplier = max(
            self.combo_multiplier - dt * self.combo_decay_rate, COMBO_FLOOR
        )
        self.drop_timer.pass_time(dt)

    # -- Multiplicateurs --
    def drop_bonus(self) -> float:
        return self.drop_timer.bonus()

    def boost_multiplier(self) -> float:
        return self.active_boost.multiplier if self.active_boost is not None else 0.0

    def current_multiplier(self) -> float:
        return self.drop_bonus() + self.combo_multiplier + self.boost_multiplier()

    def add_mult(self, total_cleared: int) -> None:
        """Augmente le combo de `total_cleared²` (sans plafond)."""

        self.combo_multiplier += float(total_cleared * total_cleared)

    def reset_drop_timer(self) -> None:
        self.drop_timer.reset()

    # -- Score & rang --
    def threshold(self) -> int:
        """Score nécessaire pour passer au rang suivant."""

        return rank_threshold(self.rank)

    def percent_to_next_rank(self) -> float:
        return self.rank_buffer / self.threshold()

    def add_score(self, base_points: int) -> int:
        """Ajoute des points multipliés et gère les montées de rang.

        Returns:
            Le gain effectivement ajouté au score.
        """

        delta = _round_half_up(base_points * self.current_multiplier())
        self.score += delta
        self.rank_buffer += delta

        while self.rank_buffer >= self.threshold():
            self.rank_buffer -= self.threshold()
            self.rank += 1
            logger.info("Rang %d atteint (score %d)", self.rank, self.score)

        return delta

    def rank_boost(self) -> bool:
        """Consomme un rang pour activer un boost temporaire.

        Le multiplicateur vaut le rang courant ; la durée vaut
        `nouveau_rang * boost_seconds_per_rank`.
        """

        if self.rank <= 1 or self.active_boost is not None:
            return False

        multiplier = float(self.rank)
        self.rank -= 1
        duration = self.rank * self.boost_seconds_per_rank
        self.active_boost = RankBoost(
            multiplier=multiplier, remaining_time=duration, total_time=duration
        )
        # Le tampon doit rester sous le seuil du rang abaissé
        self.rank_buffer = min(self.rank_buffer, self.threshold() - 1)
        logger.info("Boost de rang x%s pendant %.1fs", multiplier, duration)
        return True


__all__ = ["DropTimer", "RankBoost", "ScoreEngine"]
