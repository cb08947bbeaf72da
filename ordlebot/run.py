"""
Run
===

A game in progress: one board per simultaneous target, every guess played on
all boards at once, and a guess recommender that ranks target words by the
number of possibilities they are expected to eliminate across all boards.
"""

import logging
import math
import time
from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple

from .board import Board
from .outcome_index import OutcomeIndex, build_outcome_index
from .rules import GameRules, targets_for_id


logger = logging.getLogger(__name__)


class Run:
    """
    One game of a variant.

    The guess budget in `rules.num_guesses` is reported, not enforced: callers
    decide whether to keep guessing once it is spent.
    """

    def __init__(self, rules: GameRules, target_words: List[str],
                 index: Optional[OutcomeIndex] = None):
        """
        Args:
            rules: variant being played
            target_words: hidden word of each board
            index: outcome index to share (default: the cached one for `rules`)

        Raises:
            ValueError: if there is not one target word per board, or a
                target word is not in the rules' target list
        """
        if len(target_words) != rules.num_boards:
            raise ValueError(
                f"{rules.name} plays {rules.num_boards} boards, got {len(target_words)} target words"
            )
        self.rules = rules
        self.index = index if index is not None else build_outcome_index(rules)
        self.boards = [Board(word, self.index) for word in target_words]
        self.guesses: List[str] = []

    @property
    def target_words(self) -> List[str]:
        return [board.target for board in self.boards]

    @property
    def guesses_remaining(self) -> int:
        return max(self.rules.num_guesses - len(self.guesses), 0)

    def add_guess(self, guess: str):
        """Play `guess` on every board."""
        for board in self.boards:
            board.add_guess(guess, self.index)
        self.guesses.append(guess)
        logger.debug("Guess %d: %s (%d possible across boards)",
                     len(self.guesses), guess, self.possibility_score())

    def is_solved(self) -> bool:
        return all(board.solved for board in self.boards)

    def is_failed(self) -> bool:
        """Guess budget spent with at least one board unsolved."""
        return self.guesses_remaining == 0 and not self.is_solved()

    def possibility_score(self) -> int:
        """Total possibilities left across boards. Never increases."""
        return sum(board.num_possible for board in self.boards)

    def compute_best_guess(self) -> Tuple[str, float]:
        """
        Best next guess and its score.

        A board narrowed down to a single word is finished first: that word is
        returned with an infinite score. Otherwise every target word is scored
        by its expected eliminations summed over all boards; the first maximum
        in target-list order wins.
        """
        unsolved = [board for board in self.boards if not board.solved]
        if not unsolved:
            raise RuntimeError("Run is already solved")

        for board in unsolved:
            if board.num_possible == 1:
                word = self.index.targets[board.possible_indices[0]]
                logger.debug("Only %s left on a board, playing it", word)
                return word, math.inf

        best_word = None
        best_score = -math.inf
        for word in self.index.targets:
            score = sum(board.expected_reduction(word, self.index) for board in self.boards)
            if score > best_score:
                best_score = score
                best_word = word

        return best_word, best_score


# ============================================================================
# PLAYING AND BENCHMARKING
# ============================================================================

def play_out(run: Run, first_guess: Optional[str] = None) -> bool:
    """
    Keep playing recommended guesses until solved or out of guesses.

    Returns:
        whether every board was solved
    """
    while not run.is_solved() and run.guesses_remaining > 0:
        if first_guess is not None and not run.guesses:
            guess = first_guess
        else:
            guess, _ = run.compute_best_guess()
        run.add_guess(guess)
    return run.is_solved()


def benchmark(rules: GameRules, puzzle_ids: Iterable[int],
              first_guess: Optional[str] = None) -> Dict:
    """
    Play the daily puzzles for `puzzle_ids` and collect guess counts.

    Unsolved puzzles count as num_guesses + 1.

    Returns:
        Dict with results
    """
    puzzle_ids = list(puzzle_ids)
    index = build_outcome_index(rules)

    results = []
    dist = Counter()
    failures = []

    start = time.time()
    for i, puzzle_id in enumerate(puzzle_ids):
        if i and i % 100 == 0:
            elapsed = time.time() - start
            logger.info("[%d/%d] %.1f puzzles/s, avg=%.4f", i, len(puzzle_ids),
                        i / elapsed if elapsed > 0 else 0, sum(results) / len(results))

        run = Run(rules, targets_for_id(rules, puzzle_id), index=index)
        if play_out(run, first_guess):
            n = len(run.guesses)
        else:
            n = rules.num_guesses + 1
            failures.append(puzzle_id)
        results.append(n)
        dist[n] += 1

    elapsed = time.time() - start

    return {
        'variant': rules.name,
        'boards': rules.num_boards,
        'guess_budget': rules.num_guesses,
        'total': len(puzzle_ids),
        'average': sum(results) / len(results) if results else 0.0,
        'distribution': dict(sorted(dist.items())),
        'failures': len(failures),
        'failed_ids': failures[:20],
        'time': elapsed,
        'rate': len(puzzle_ids) / elapsed if elapsed > 0 else 0.0,
    }


def print_results(results: Dict):
    """Print a benchmark summary: guess-count histogram and failed puzzle ids."""
    played = results['total']
    budget = results['guess_budget']
    rule = "=" * 50

    print("\n" + rule)
    print(f"{results['variant'].upper()}: {results['boards']} boards, "
          f"{budget} guesses, {played} puzzles")
    print(rule)
    if not played:
        print("No puzzles played")
        print(rule)
        return

    solved = played - results['failures']
    print(f"Solved: {solved}/{played}  mean guesses {results['average']:.4f}")
    print(f"{results['time']:.1f}s total, {results['rate']:.1f} puzzles/sec")
    print("\nGuesses used:")
    for n, count in results['distribution'].items():
        label = f"{n:>3}" if n <= budget else "  X"
        share = count / played
        print(f"  {label} {count:5d} {share:7.2%} {'#' * round(share * 40)}")
    if results['failed_ids']:
        print(f"\nUnsolved puzzle ids: {', '.join(map(str, results['failed_ids']))}")
    print(rule)


# ============================================================================
# MAIN
# ============================================================================

if __name__ == "__main__":
    import sys

    from .rules import load_rules

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    variant = sys.argv[1] if len(sys.argv) > 1 else "test"
    n_puzzles = int(sys.argv[2]) if len(sys.argv) > 2 else 50

    rules = load_rules(variant)
    results = benchmark(rules, range(1, n_puzzles + 1))
    print_results(results)
