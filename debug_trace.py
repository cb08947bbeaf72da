"""Debug script for tracing solver behavior."""

import logging
import sys

from ordlebot.feedback import feedback_to_string
from ordlebot.rules import load_rules, targets_for_id
from ordlebot.run import Run


def trace_run(variant, puzzle_id, first_guess=None):
    rules = load_rules(variant)
    targets = targets_for_id(rules, puzzle_id)
    run = Run(rules, targets)

    print(f"\n=== Tracing {variant} #{puzzle_id}: {targets} ===\n")

    while not run.is_solved() and run.guesses_remaining > 0:
        turn = len(run.guesses) + 1
        print(f"Turn {turn}: {run.possibility_score()} possibilities")

        for board_i, board in enumerate(run.boards):
            if board.solved:
                continue
            cands = board.possible_words(run.index)
            if len(cands) <= 10:
                print(f"  Board {board_i}: {cands}")
                # Expected eliminations of each candidate on this board
                for c in cands:
                    print(f"    expected_reduction({c}) = "
                          f"{board.expected_reduction(c, run.index):.4f}")

        if first_guess is not None and turn == 1:
            guess, score = first_guess, None
        else:
            guess, score = run.compute_best_guess()
        run.add_guess(guess)

        patterns = [feedback_to_string(b.patterns[-1]) for b in run.boards
                    if b.guesses and b.guesses[-1] == guess]
        shown = "n/a" if score is None else f"{score:.4f}"
        print(f"  Guess: {guess} (score={shown}) -> {' '.join(patterns)}")

        for board in run.boards:
            if not board.possible[board.target_index]:
                print(f"  ERROR: {board.target} not in remaining possibilities!")
                return None

    if run.is_solved():
        print(f"\n✓ Solved in {len(run.guesses)} guesses!")
        return len(run.guesses)

    print(f"\n✗ Failed to solve in {rules.num_guesses} guesses")
    return rules.num_guesses + 1


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    variant = sys.argv[1] if len(sys.argv) > 1 else "test"
    for puzzle_id in [int(a) for a in sys.argv[2:]] or [215]:
        trace_run(variant, puzzle_id)
