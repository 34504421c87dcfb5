"""Correspondance clavier -> intentions de contrôle."""

from __future__ import annotations

from typing import Optional, Tuple

import pygame

from edgedrop.app.controls import Intent

# (libellé, touche pygame, intention)
KEY_BINDINGS: Tuple[Tuple[str, int, Intent], ...] = (
    ("SPACE", pygame.K_SPACE, Intent.PLACE),
    ("W", pygame.K_w, Intent.PLUS_OFFSET),
    ("UP", pygame.K_UP, Intent.PLUS_OFFSET),
    ("S", pygame.K_s, Intent.MINUS_OFFSET),
    ("DOWN", pygame.K_DOWN, Intent.MINUS_OFFSET),
    ("A", pygame.K_a, Intent.ROTATE_LEFT),
    ("LEFT", pygame.K_LEFT, Intent.ROTATE_LEFT),
    ("D", pygame.K_d, Intent.ROTATE_RIGHT),
    ("RIGHT", pygame.K_RIGHT, Intent.ROTATE_RIGHT),
    ("B", pygame.K_b, Intent.RANK_BOOST),
    ("0", pygame.K_0, Intent.PRINT_HISTORY),
    ("R", pygame.K_r, Intent.RESTART),
)


def intent_for_key(
    key: int, bindings: Tuple[Tuple[str, int, Intent], ...] = KEY_BINDINGS
) -> Optional[Intent]:
    """Retourne l'intention associée à une touche, ou None."""

    for _label, bound_key, intent in bindings:
        if bound_key == key:
            return intent
    return None


__all__ = ["KEY_BINDINGS", "intent_for_key"]
