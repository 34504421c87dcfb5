"""Instantanés immuables de l'état d'une session.

Les collaborateurs (rendu, HUD, audio) ne lisent que ces objets :
- `SessionSnapshot` : vue figée (tuples) de la grille et du score
- `snapshot_to_dict` : forme JSON-friendly (listes/dicts primitifs) pour le débogage
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np

SCHEMA_VERSION = "0.1.0"

BoardRows = Tuple[Tuple[int, ...], ...]


def freeze_board(board: np.ndarray) -> BoardRows:
    """Convertit une matrice numpy en tuples de lignes."""

    return tuple(tuple(int(cell) for cell in row) for row in board)


@dataclass(frozen=True)
class BoostSnapshot:
    multiplier: float
    remaining_time: float
    total_time: float


@dataclass(frozen=True)
class SessionSnapshot:
    """Vue en lecture seule d'une session à un instant donné."""

    size: int
    board: BoardRows
    display_board: BoardRows
    rotation: int
    score: int
    rank: int
    percent_to_next_rank: float
    current_multiplier: float
    drop_bonus: float
    combo_multiplier: float
    rank_boost: Optional[BoostSnapshot]
    mode: str
    enable_input: bool
    next_slot: int
    offset: int
    drop: int
    placement_history: Tuple[int, ...]


def snapshot_to_dict(snapshot: SessionSnapshot) -> Dict[str, Any]:
    """Convertit un SessionSnapshot en dict JSON-friendly."""

    boost = snapshot.rank_boost
    return {
        "schema_version": SCHEMA_VERSION,
        "size": snapshot.size,
        "board": [list(row) for row in snapshot.board],
        "display_board": [list(row) for row in snapshot.display_board],
        "rotation": snapshot.rotation,
        "score": snapshot.score,
        "rank": snapshot.rank,
        "percent_to_next_rank": snapshot.percent_to_next_rank,
        "current_multiplier": snapshot.current_multiplier,
        "drop_bonus": snapshot.drop_bonus,
        "combo_multiplier": snapshot.combo_multiplier,
        "rank_boost": (
            None
            if boost is None
            else {
                "multiplier": boost.multiplier,
                "remaining_time": boost.remaining_time,
                "total_time": boost.total_time,
            }
        ),
        "mode": snapshot.mode,
        "enable_input": snapshot.enable_input,
        "next_slot": snapshot.next_slot,
        "offset": snapshot.offset,
        "drop": snapshot.drop,
        "placement_history": list(snapshot.placement_history),
    }


__all__ = [
    "SCHEMA_VERSION",
    "BoardRows",
    "BoostSnapshot",
    "SessionSnapshot",
    "freeze_board",
    "snapshot_to_dict",
]
