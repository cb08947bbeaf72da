"""
Pytest configuration for ordlebot.

Small closed word lists so every test builds its outcome index instantly.
"""

import pytest

from ordlebot.config import ALPHABET
from ordlebot.outcome_index import build_outcome_index
from ordlebot.rules import GameRules


SMALL_TARGETS = ("DANDY", "CANDY", "STONE", "GLOWN", "CRIMP", "TEETH")
SMALL_VALID = SMALL_TARGETS + ("DEALT", "ALGOL", "GREEN")


@pytest.fixture
def small_rules():
    return GameRules(
        name="small",
        num_boards=1,
        num_guesses=6,
        alphabet=ALPHABET,
        words_valid=SMALL_VALID,
        words_target=SMALL_TARGETS,
    )


@pytest.fixture
def small_index(small_rules):
    return build_outcome_index(small_rules)


@pytest.fixture
def tiny_rules():
    """Three targets small enough to score by hand."""
    return GameRules(
        name="tiny",
        num_boards=1,
        num_guesses=6,
        alphabet=ALPHABET,
        words_valid=("DANDY", "CANDY", "STONE"),
        words_target=("DANDY", "CANDY", "STONE"),
    )
