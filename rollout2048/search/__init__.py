# -*- coding: utf-8 -*-
"""
Module containing the Monte Carlo rollout search for Game 2048.
"""
from .actor import MonteCarloAgent
from .evaluator import MoveEvaluation, best_move, evaluate_direction, evaluate_moves
from .rollout import random_move, rollout, run_playout

__all__ = [
    'MonteCarloAgent',
    'MoveEvaluation',
    'best_move',
    'evaluate_direction',
    'evaluate_moves',
    'random_move',
    'rollout',
    'run_playout',
]
