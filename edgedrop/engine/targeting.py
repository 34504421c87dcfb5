"""Résolution de l'emplacement effectif d'une pose.

`resolve_drop` combine l'emplacement prévu et le décalage du joueur, avec
bouclage uniquement aux deux extrémités de l'espace `[0, 4N)`.
`oriented_offset` traduit une intention +/- brute en décalage signé selon le
bord actif, pour que « + » garde le même sens apparent sur les quatre bords.
"""

from __future__ import annotations

from edgedrop.engine.perimeter import Edge, classify, lane_index


def clamp_offset(offset: int) -> int:
    return max(-1, min(1, offset))


def resolve_drop(n: int, next_slot: int, offset: int) -> int:
    """Emplacement effectivement utilisé pour la prochaine pose."""

    last = 4 * n - 1
    if next_slot == 0 and offset == -1:
        return last
    if next_slot == last and offset == 1:
        return 0
    return next_slot + offset


def oriented_offset(n: int, slot: int, raw: int) -> int:
    """Corrige le signe d'une intention `raw` (+1/-1) selon le bord et la moitié de voie."""

    edge = classify(n, slot)
    second_half = lane_index(n, slot) >= n // 2

    if edge in (Edge.LEFT, Edge.RIGHT):
        return raw if second_half else -raw
    # Haut et bas
    return -raw if second_half else raw


__all__ = ["clamp_offset", "resolve_drop", "oriented_offset"]
