"""
Feedback Engine
===============

Colored feedback of one guess against one target, with duplicate letters
credited at most as many times as they occur in the target.

Patterns have two forms:
- a tuple of LetterOutcome values (hashable, orderable, readable)
- a packed integer code 0-242 (base 3, position 0 least significant) used by
  the numba kernels and the outcome matrix
"""

from enum import IntEnum
from typing import List, Sequence, Tuple, Union

import numpy as np
from numba import jit, prange

from .config import WORD_LENGTH


class LetterOutcome(IntEnum):
    ABSENT = 0
    PRESENT = 1
    EXACT = 2


FeedbackPattern = Tuple[LetterOutcome, ...]

N_PATTERNS = 3 ** WORD_LENGTH
ALL_EXACT = (LetterOutcome.EXACT,) * WORD_LENGTH
ALL_EXACT_CODE = N_PATTERNS - 1  # 2 + 2*3 + 2*9 + 2*27 + 2*81 = 242

_PATTERN_CHARS = "BYG"


# ============================================================================
# PURE PYTHON FEEDBACK
# ============================================================================

def compute_feedback(guess: str, target: str) -> FeedbackPattern:
    """
    Compute the feedback pattern for a guess against a target.

    Exact matches consume their letter first; remaining guess letters are
    marked PRESENT left to right while unconsumed occurrences of that letter
    are left in the target, ABSENT otherwise.

    Raises:
        ValueError: if either word is not WORD_LENGTH letters long
    """
    if len(guess) != WORD_LENGTH or len(target) != WORD_LENGTH:
        raise ValueError(
            f"Expected {WORD_LENGTH}-letter words, got {guess!r} and {target!r}"
        )

    feedback = [LetterOutcome.ABSENT] * WORD_LENGTH
    remaining = {}
    for c in target:
        remaining[c] = remaining.get(c, 0) + 1

    # First pass: exact
    for i in range(WORD_LENGTH):
        if guess[i] == target[i]:
            feedback[i] = LetterOutcome.EXACT
            remaining[guess[i]] -= 1

    # Second pass: present
    for i in range(WORD_LENGTH):
        if feedback[i] == LetterOutcome.ABSENT:
            c = guess[i]
            if remaining.get(c, 0) > 0:
                feedback[i] = LetterOutcome.PRESENT
                remaining[c] -= 1

    return tuple(feedback)


def encode_pattern(pattern: Sequence[int]) -> int:
    """Pack a pattern into its integer code (0-242)."""
    result = 0
    multiplier = 1
    for outcome in pattern:
        result += int(outcome) * multiplier
        multiplier *= 3
    return result


def decode_pattern(code: int) -> FeedbackPattern:
    """Unpack an integer code into a pattern."""
    if not 0 <= code < N_PATTERNS:
        raise ValueError(f"Invalid pattern code: {code}")
    outcomes = []
    for _ in range(WORD_LENGTH):
        outcomes.append(LetterOutcome(code % 3))
        code //= 3
    return tuple(outcomes)


def feedback_to_string(pattern: Union[int, Sequence[int]]) -> str:
    """Render a pattern (tuple or code) as B/Y/G, e.g. 'BYGGB'."""
    if isinstance(pattern, (int, np.integer)):
        pattern = decode_pattern(int(pattern))
    return "".join(_PATTERN_CHARS[int(o)] for o in pattern)


def string_to_pattern(text: str) -> FeedbackPattern:
    """Parse a B/Y/G string (case-insensitive) into a pattern."""
    if len(text) != WORD_LENGTH:
        raise ValueError(f"Expected {WORD_LENGTH} pattern chars, got {text!r}")
    outcomes = []
    for c in text.upper():
        if c not in _PATTERN_CHARS:
            raise ValueError(f"Invalid pattern char: {c}")
        outcomes.append(LetterOutcome(_PATTERN_CHARS.index(c)))
    return tuple(outcomes)


# ============================================================================
# NUMBA-ACCELERATED FEEDBACK
# ============================================================================

def words_to_codes(words: List[str], alphabet: Sequence[str]) -> np.ndarray:
    """Convert words to an (n, WORD_LENGTH) array of alphabet indices."""
    letter_to_idx = {c: i for i, c in enumerate(alphabet)}
    arr = np.zeros((len(words), WORD_LENGTH), dtype=np.int32)
    for i, w in enumerate(words):
        if len(w) != WORD_LENGTH:
            raise ValueError(f"Expected {WORD_LENGTH}-letter word, got {w!r}")
        for j, c in enumerate(w):
            if c not in letter_to_idx:
                raise ValueError(f"Letter {c!r} of {w!r} is not in the alphabet")
            arr[i, j] = letter_to_idx[c]
    return arr


@jit(nopython=True, cache=True)
def feedback_code(guess: np.ndarray, target: np.ndarray, n_letters: int) -> int:
    """
    Packed feedback code for one guess/target pair of letter codes.

    Same scoring as compute_feedback: exact letters are packed and their
    target occurrences consumed first, then the leftover occurrences are
    handed out to the remaining guess letters left to right.
    """
    unmatched = np.zeros(n_letters, dtype=np.int32)
    exact = np.zeros(WORD_LENGTH, dtype=np.bool_)
    code = 0
    place = 1

    for i in range(WORD_LENGTH):
        if guess[i] == target[i]:
            exact[i] = True
            code += 2 * place
        else:
            unmatched[target[i]] += 1
        place *= 3

    place = 1
    for i in range(WORD_LENGTH):
        if not exact[i] and unmatched[guess[i]] > 0:
            unmatched[guess[i]] -= 1
            code += place
        place *= 3

    return code


@jit(nopython=True, parallel=True, cache=True)
def compute_feedback_matrix(guess_chars: np.ndarray, target_chars: np.ndarray,
                            n_letters: int) -> np.ndarray:
    """
    Feedback code of every valid guess against every target.

    Rows are guesses and columns targets, in list order; codes fit in uint8
    since N_PATTERNS is 243. Rows are filled in parallel.
    """
    matrix = np.empty((guess_chars.shape[0], target_chars.shape[0]), dtype=np.uint8)
    for g in prange(guess_chars.shape[0]):
        row = matrix[g]
        for t in range(target_chars.shape[0]):
            row[t] = feedback_code(guess_chars[g], target_chars[t], n_letters)
    return matrix
