"""
Configuration for the Monte Carlo rollout search.
"""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """
    Configuration of the move evaluator.

    Attributes
    ----------
    trials_per_move : int
        Random playouts run for every legal direction. More trials give a more reliable
        ranking at a proportional cost in time.
    num_workers : int
        Processes used to evaluate the directions. 1 runs everything in the calling process.
    """

    trials_per_move: int = 500
    num_workers: int = 1

    def __post_init__(self):
        if self.trials_per_move < 1:
            raise ValueError(f'trials_per_move must be >= 1, got {self.trials_per_move}')
        if self.num_workers < 1:
            raise ValueError(f'num_workers must be >= 1, got {self.num_workers}')
