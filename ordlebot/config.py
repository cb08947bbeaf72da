"""
Game variant configuration.

Word lists are plain text files (one word per line) grouped in a directory per
list name: <WORDS_DIR>/<list>/targets.txt and <WORDS_DIR>/<list>/valid.txt.
Only the small `test` list ships with the package.
"""

import os


WORD_LENGTH = 5
ALPHABET = tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

WORDS_DIR = os.environ.get(
    "ORDLEBOT_WORDS_DIR",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "data"),
)

# Daily duotrigordle ids after 187 were generated without GIPSY/GYPSY in the pool
LEGACY_POOL_EXCLUSION = {
    "after_id": 187,
    "words": ("GIPSY", "GYPSY"),
}

# name -> word list, boards, guesses, pool exclusion
VARIANTS = {
    "duotrigordle": {"words": "duotrigordle", "boards": 32, "guesses": 37,
                     "exclusion": LEGACY_POOL_EXCLUSION},
    "quordle": {"words": "duotrigordle", "boards": 4, "guesses": 9,
                "exclusion": LEGACY_POOL_EXCLUSION},
    "dordle": {"words": "duotrigordle", "boards": 2, "guesses": 7,
               "exclusion": LEGACY_POOL_EXCLUSION},
    "wordle": {"words": "duotrigordle", "boards": 1, "guesses": 6,
               "exclusion": LEGACY_POOL_EXCLUSION},
    "test": {"words": "test", "boards": 1, "guesses": 6, "exclusion": None},
}
