from .generation import Generation
from .recombination import DEFAULT_ALPHA, Recombination, simple, whole_arithmetic
from .selection import TOURNAMENT_SIZE, TOURNAMENT_WINNERS, Selection

__all__ = [
    "DEFAULT_ALPHA",
    "TOURNAMENT_SIZE",
    "TOURNAMENT_WINNERS",
    "Generation",
    "Recombination",
    "Selection",
    "simple",
    "whole_arithmetic",
]
