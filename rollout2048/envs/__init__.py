# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game turn loop.

This module provides the `TwentyFortyEight` class, which owns the game grid and lets the Monte Carlo agent play it.
"""

from .twentyfortyeight import GameResult, TwentyFortyEight

__all__ = ['GameResult', 'TwentyFortyEight']
