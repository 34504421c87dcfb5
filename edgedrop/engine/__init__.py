"""Engine package exposing rules, grid and scoring modules."""

from . import rules  # re-export for convenience
from .errors import InvalidPlacementLocation, NoSpace, PlacementError
from .grid import Grid, Placement
from .perimeter import Edge
from .score import ScoreEngine

__all__ = [
    "rules",
    "Edge",
    "Grid",
    "Placement",
    "ScoreEngine",
    "PlacementError",
    "InvalidPlacementLocation",
    "NoSpace",
]
