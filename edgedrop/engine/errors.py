"""Erreurs levées par le moteur lors d'une pose."""

from __future__ import annotations


class PlacementError(Exception):
    """Erreur de base pour une pose refusée."""


class InvalidPlacementLocation(PlacementError):
    """Emplacement hors de `[0, 4N)`.

    Ne doit jamais survenir via l'API session : signale un défaut interne.
    """

    def __init__(self, slot: int) -> None:
        super().__init__(
            f"Emplacement invalide {slot} (numérotation depuis le coin haut-gauche, sens horaire)"
        )
        self.slot = slot


class NoSpace(PlacementError):
    """La voie choisie est pleine depuis ce côté."""

    def __init__(self) -> None:
        super().__init__("Voie trop pleine pour accueillir une tuile")


__all__ = ["PlacementError", "InvalidPlacementLocation", "NoSpace"]
