"""
Game rules for the Wordle family.

Every variant shares one word list set and differs only in how many boards are
played at once and how many guesses are allowed.
"""

import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .config import ALPHABET, VARIANTS, WORDS_DIR


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PoolExclusion:
    """Words dropped from the target pool for puzzle ids above `after_id`."""
    after_id: int
    words: Tuple[str, ...]


@dataclass(frozen=True)
class GameRules:
    name: str
    num_boards: int
    num_guesses: int
    alphabet: Tuple[str, ...]
    words_valid: Tuple[str, ...]
    words_target: Tuple[str, ...]
    pool_exclusion: Optional[PoolExclusion] = None

    def with_boards_and_guesses(self, boards: int, guesses: int,
                                name: Optional[str] = None) -> "GameRules":
        """Copy of these rules with a different board count and guess budget."""
        return dataclasses.replace(self, name=name or self.name,
                                   num_boards=boards, num_guesses=guesses)

    def target_pool(self, puzzle_id: int) -> List[str]:
        """Target words eligible for the given puzzle id."""
        pool = list(self.words_target)
        if self.pool_exclusion is not None and puzzle_id > self.pool_exclusion.after_id:
            for word in self.pool_exclusion.words:
                if word in pool:
                    pool.remove(word)
        return pool


def targets_for_id(rules: GameRules, puzzle_id: int) -> List[str]:
    """
    Target words (one per board) for a daily puzzle id.

    Draws raw 32-bit outputs from MT19937 seeded with init_genrand(puzzle_id)
    and takes each modulo the pool size, skipping words already chosen. numpy's
    legacy RandomState seeds an integer exactly that way, so ids match the
    published puzzles.
    """
    pool = rules.target_pool(puzzle_id)
    if len(pool) < rules.num_boards:
        raise ValueError(
            f"Target pool of {len(pool)} words is too small for {rules.num_boards} boards"
        )

    rng = np.random.RandomState(puzzle_id & 0xFFFFFFFF)
    targets = []
    while len(targets) < rules.num_boards:
        idx = int(rng.randint(0, 2 ** 32, dtype=np.uint32)) % len(pool)
        word = pool[idx]
        if word not in targets:
            targets.append(word)
    return targets


# ============================================================================
# LOADING
# ============================================================================

def load_words(filepath: str) -> List[str]:
    """Load word list from file."""
    with open(filepath, 'r') as f:
        return [line.strip().upper() for line in f if line.strip()]


def load_rules(name: str, words_dir: Optional[str] = None) -> GameRules:
    """
    Build the rules of a named variant from its word lists.

    Args:
        name: variant name, a key of config.VARIANTS
        words_dir: directory holding one sub-directory per word list
            (default: config.WORDS_DIR)
    """
    if name not in VARIANTS:
        raise ValueError(f"Unknown variant {name!r}, expected one of {sorted(VARIANTS)}")
    variant = VARIANTS[name]

    list_dir = os.path.join(words_dir or WORDS_DIR, variant["words"])
    targets = load_words(os.path.join(list_dir, "targets.txt"))
    valid = load_words(os.path.join(list_dir, "valid.txt"))

    # Every target must be guessable
    valid_set = set(valid)
    missing = [w for w in targets if w not in valid_set]
    if missing:
        logger.warning("%d target words missing from %s valid list, adding them",
                       len(missing), variant["words"])
        valid.extend(missing)

    exclusion = variant["exclusion"]
    logger.info("Loaded %s: %d targets, %d valid guesses", name, len(targets), len(valid))
    return GameRules(
        name=name,
        num_boards=variant["boards"],
        num_guesses=variant["guesses"],
        alphabet=ALPHABET,
        words_valid=tuple(valid),
        words_target=tuple(targets),
        pool_exclusion=PoolExclusion(exclusion["after_id"], tuple(exclusion["words"]))
        if exclusion else None,
    )
