# -*- coding: utf-8 -*-
"""
Monte Carlo rollout engine for the 2048 game.

The package is organised leaf-first: ``core`` holds the grid and the pure game rules,
``search`` the random playouts and the move evaluator built on them, and ``envs`` a
thin turn driver that plays complete games.
"""
from .config import SearchConfig
from .core import Direction, Grid, spawn, swipe
from .search import MonteCarloAgent, best_move

__all__ = ['Direction', 'Grid', 'MonteCarloAgent', 'SearchConfig', 'best_move', 'spawn', 'swipe']
