"""
ordlebot - Wordle / Dordle / Quordle / Duotrigordle solver
===========================================================

Narrows each board's possible targets from feedback and recommends the guess
expected to eliminate the most possibilities across all boards.
"""

__version__ = "0.1.0"

from .feedback import LetterOutcome, compute_feedback, feedback_to_string
from .rules import GameRules, load_rules, load_words, targets_for_id
from .outcome_index import OutcomeIndex, build_outcome_index
from .board import Board
from .run import Run, play_out, benchmark, print_results
