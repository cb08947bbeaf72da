"""
Outcome Index
=============

For a fixed (valid guesses, targets) pair: which targets would produce each
feedback pattern for each guess. Backed by the full feedback matrix, computed
once per GameRules value and shared read-only by every board and run.
"""

import logging
import time
from functools import lru_cache
from typing import Dict, Sequence, Union

import numpy as np
from numba import jit

from .feedback import (
    FeedbackPattern,
    N_PATTERNS,
    compute_feedback_matrix,
    decode_pattern,
    encode_pattern,
    words_to_codes,
)
from .rules import GameRules


logger = logging.getLogger(__name__)


@jit(nopython=True, cache=True)
def pattern_counts(feedback_row: np.ndarray, possible: np.ndarray) -> np.ndarray:
    """
    Size of each bucket of one guess, restricted to the possible targets.

    `feedback_row` is the guess's row of the feedback matrix and `possible` a
    board's boolean mask over the same targets. The result is indexed by
    pattern code, N_PATTERNS int64 entries summing to the number of possible
    targets; entry p equals |possible ∩ bucket p|.
    """
    sizes = np.zeros(N_PATTERNS, dtype=np.int64)
    for t in np.nonzero(possible)[0]:
        sizes[feedback_row[t]] += 1
    return sizes


class OutcomeIndex:
    """
    guess -> feedback pattern -> target indices.

    For any guess the buckets partition range(n_targets): each target lands in
    exactly one pattern.
    """

    def __init__(self, guesses: Sequence[str], targets: Sequence[str],
                 feedback_matrix: np.ndarray):
        self.guesses = tuple(guesses)
        self.targets = tuple(targets)
        self.guess_to_idx = {w: i for i, w in enumerate(self.guesses)}
        self.target_to_idx = {}
        for i, w in enumerate(self.targets):
            self.target_to_idx.setdefault(w, i)

        if feedback_matrix.shape != (len(self.guesses), len(self.targets)):
            raise ValueError(
                f"Feedback matrix shape {feedback_matrix.shape} does not match "
                f"{len(self.guesses)} guesses x {len(self.targets)} targets"
            )
        self.feedback_matrix = feedback_matrix
        self.feedback_matrix.setflags(write=False)

        self._buckets: Dict[str, Dict[FeedbackPattern, np.ndarray]] = {}

    @property
    def n_targets(self) -> int:
        return len(self.targets)

    def __contains__(self, guess: str) -> bool:
        return guess in self.guess_to_idx

    def __len__(self) -> int:
        return len(self.guesses)

    def row(self, guess: str) -> np.ndarray:
        """Feedback codes of `guess` against every target."""
        idx = self.guess_to_idx.get(guess)
        if idx is None:
            raise KeyError(f"Guess '{guess}' not in valid word list")
        return self.feedback_matrix[idx]

    def __getitem__(self, guess: str) -> Dict[FeedbackPattern, np.ndarray]:
        """Pattern -> sorted target indices, for every pattern this guess can produce."""
        buckets = self._buckets.get(guess)
        if buckets is None:
            row = self.row(guess)
            buckets = {}
            for code in np.unique(row):
                indices = np.flatnonzero(row == code)
                indices.setflags(write=False)
                buckets[decode_pattern(int(code))] = indices
            self._buckets[guess] = buckets
        return buckets

    def targets_matching(self, guess: str,
                         pattern: Union[int, FeedbackPattern]) -> np.ndarray:
        """Boolean mask of targets that give `pattern` for `guess`."""
        code = pattern if isinstance(pattern, (int, np.integer)) else encode_pattern(pattern)
        return self.row(guess) == code

    def pattern_for(self, guess: str, target_index: int) -> FeedbackPattern:
        return decode_pattern(int(self.row(guess)[target_index]))


def build_index(guesses: Sequence[str], targets: Sequence[str],
                alphabet: Sequence[str]) -> OutcomeIndex:
    """Compute the feedback matrix for all guess/target pairs and wrap it."""
    guess_chars = words_to_codes(list(guesses), alphabet)
    target_chars = words_to_codes(list(targets), alphabet)

    logger.info("Precomputing feedback matrix (%d guesses x %d targets)...",
                len(guesses), len(targets))
    start = time.time()
    matrix = compute_feedback_matrix(guess_chars, target_chars, len(alphabet))
    elapsed = time.time() - start
    pairs = len(guesses) * len(targets)
    logger.info("Done in %.1fs (%.1fM pairs/sec)", elapsed,
                pairs / elapsed / 1e6 if elapsed > 0 else float('inf'))

    return OutcomeIndex(guesses, targets, matrix)


@lru_cache(maxsize=8)
def _cached_index(guesses: tuple, targets: tuple, alphabet: tuple) -> OutcomeIndex:
    return build_index(guesses, targets, alphabet)


def build_outcome_index(rules: GameRules) -> OutcomeIndex:
    """
    Outcome index for a rules value.

    Cached on the word lists, so variants that only differ in board count or
    guess budget share one index.
    """
    return _cached_index(rules.words_valid, rules.words_target, rules.alphabet)
