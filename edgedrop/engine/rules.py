"""Règles et constantes du jeu.

Ce module expose le contrat de configuration attendu par le moteur et les tests:
- dimensions de plateau (`DEFAULT_BOARD_SIZE`, `MIN_BOARD_SIZE`)
- paramètres du minuteur de chute et du multiplicateur de combo
- paramètres de rang (seuils, durée des boosts)
"""

# Plateau
DEFAULT_BOARD_SIZE: int = 4
MIN_BOARD_SIZE: int = 2

# Points de base pour une tuile posée
BASE_DROP_POINTS: int = 1

# Minuteur de chute: bonus max accordé juste après une pose, décroît en DROP_TIMER_SECONDS
DROP_TIMER_SECONDS: float = 10.0
DROP_BONUS_MAX: float = 5.0

# Multiplicateur de combo: plancher et vitesse de décroissance (par seconde)
COMBO_FLOOR: float = 1.0
COMBO_DECAY_RATE: float = 3.0

# Rang: seuil(rang) = RANK_THRESHOLD_FACTOR * rang²
RANK_THRESHOLD_FACTOR: int = 10
RANK_BOOST_SECONDS_PER_RANK: float = 5.0


def rank_threshold(rank: int) -> int:
    """Score à accumuler dans le tampon pour passer du rang `rank` au suivant."""

    return RANK_THRESHOLD_FACTOR * rank * rank


__all__ = [
    "DEFAULT_BOARD_SIZE",
    "MIN_BOARD_SIZE",
    "BASE_DROP_POINTS",
    "DROP_TIMER_SECONDS",
    "DROP_BONUS_MAX",
    "COMBO_FLOOR",
    "COMBO_DECAY_RATE",
    "RANK_THRESHOLD_FACTOR",
    "RANK_BOOST_SECONDS_PER_RANK",
    "rank_threshold",
]
