"""Intentions de contrôle abstraites et leur application à une session.

La couche d'entrée (clavier, manette) traduit ses évènements en `Intent` ;
ce module applique l'intention à la session, y compris la correction de
signe des décalages +/- selon le bord actif.
"""

from __future__ import annotations

import logging
from enum import Enum

from edgedrop.app.session import GameSession, Mode
from edgedrop.engine.targeting import oriented_offset

logger = logging.getLogger(__name__)


class Intent(Enum):
    """Intentions du joueur, indépendantes du périphérique."""

    PLACE = "PLACE"
    PLUS_OFFSET = "PLUS_OFFSET"
    MINUS_OFFSET = "MINUS_OFFSET"
    ROTATE_LEFT = "ROTATE_LEFT"
    ROTATE_RIGHT = "ROTATE_RIGHT"
    RANK_BOOST = "RANK_BOOST"
    PRINT_HISTORY = "PRINT_HISTORY"
    RESTART = "RESTART"


def _nudge(session: GameSession, raw: int) -> bool:
    if not session.enable_input:
        return False
    before = session.offset
    delta = oriented_offset(session.size, session.next_slot, raw)
    return session.nudge_offset(delta) != before


def apply_intent(session: GameSession, intent: Intent) -> bool:
    """Applique une intention et indique si l'état de la session a changé."""

    if intent is Intent.PLACE:
        before = session.mode
        return session.place() is not None or session.mode is not before
    if intent is Intent.PLUS_OFFSET:
        return _nudge(session, 1)
    if intent is Intent.MINUS_OFFSET:
        return _nudge(session, -1)
    if intent is Intent.ROTATE_LEFT:
        return session.rotate_left()
    if intent is Intent.ROTATE_RIGHT:
        return session.rotate_right()
    if intent is Intent.RANK_BOOST:
        return session.rank_boost()
    if intent is Intent.PRINT_HISTORY:
        logger.debug("%s, prochaine pose %d", list(session.placement_history), session.next_slot)
        return False
    if intent is Intent.RESTART:
        # Ignoré en cours de partie : seul GAME_OVER autorise le redémarrage
        if session.mode is not Mode.GAME_OVER:
            return False
        session.restart()
        return True
    raise ValueError(f"Intention inconnue: {intent!r}")


__all__ = ["Intent", "apply_intent"]
