# -*- coding: utf-8 -*-
"""
Game rules for 2048: the grid, swipe moves and tile spawning.
"""

from .gameboard import TILE_SPAWN_PROBS, spawn
from .gamemove import LANES, Direction, can_swipe, cell_index, is_terminal, legal_moves, merge_lane, swipe
from .grid import Grid

__all__ = [
    'Direction',
    'Grid',
    'LANES',
    'TILE_SPAWN_PROBS',
    'can_swipe',
    'cell_index',
    'is_terminal',
    'legal_moves',
    'merge_lane',
    'spawn',
    'swipe',
]
