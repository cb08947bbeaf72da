"""
Board
=====

State of one target in a run: guesses so far, their feedback, and the target
indices still consistent with all of it.
"""

import logging
from typing import List, Optional

import numpy as np
from numba import jit

from .feedback import FeedbackPattern, compute_feedback, encode_pattern, feedback_to_string
from .outcome_index import OutcomeIndex, pattern_counts


logger = logging.getLogger(__name__)


@jit(nopython=True, cache=True)
def expected_eliminated(sizes: np.ndarray, total: int) -> float:
    """
    Expected number of possibilities eliminated, given partition sizes.

    Each pattern's probability is its share of the current possibilities,
    renormalised over all patterns; under that pattern everything outside the
    partition is eliminated. Higher is better.
    """
    if total == 0:
        return 0.0

    mass = 0.0
    weighted = 0.0
    for i in range(len(sizes)):
        s = sizes[i]
        if s > 0:
            p = s / total
            mass += p
            weighted += p * (total - s)

    if mass == 0.0:
        return 0.0
    return weighted / mass


class Board:
    """
    One hidden target and the possibility set narrowed by guesses against it.

    The possibility set is a boolean mask over the index's target list. It only
    ever shrinks, and always keeps the true target.
    """

    def __init__(self, target: str, index: OutcomeIndex):
        target_index = index.target_to_idx.get(target)
        if target_index is None:
            raise ValueError(f"Target '{target}' not in target list")

        self.target = target
        self.target_index: int = target_index
        self.guesses: List[str] = []
        self.patterns: List[FeedbackPattern] = []
        self.possible = np.ones(index.n_targets, dtype=np.bool_)
        self.solved = False

    @property
    def num_possible(self) -> int:
        return int(np.count_nonzero(self.possible))

    @property
    def possible_indices(self) -> np.ndarray:
        return np.flatnonzero(self.possible)

    @property
    def last_pattern(self) -> Optional[FeedbackPattern]:
        return self.patterns[-1] if self.patterns else None

    def possible_words(self, index: OutcomeIndex) -> List[str]:
        return [index.targets[i] for i in self.possible_indices]

    def add_guess(self, guess: str, index: OutcomeIndex):
        """Play a guess: keep only targets that would have given the same feedback."""
        if self.solved:
            return

        pattern = compute_feedback(guess, self.target)
        self.possible &= index.targets_matching(guess, encode_pattern(pattern))
        self.solved = guess == self.target
        self.guesses.append(guess)
        self.patterns.append(pattern)

        logger.debug("%s -> %s on %s: %d possible", guess, feedback_to_string(pattern),
                     self.target, self.num_possible)

    def expected_reduction(self, guess: str, index: OutcomeIndex) -> float:
        """How many possibilities `guess` is expected to eliminate on this board."""
        sizes = pattern_counts(index.row(guess), self.possible)
        return expected_eliminated(sizes, self.num_possible)

    def __repr__(self):
        return (f"Board(target={self.target!r}, guesses={len(self.guesses)}, "
                f"possible={self.num_possible}, solved={self.solved})")
