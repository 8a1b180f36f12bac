"""
Play the duel in an arcade window
Two players share the keyboard: W/S + D on the left, Up/Down + Left on the right.
"""

import argparse

from game.configs.duel_config import OPPONENTS, RULES_CONFIG, WINDOW_CONFIG
from game.duel import DuelSession, Outcome, Rules
from game.duel.duel_window import run_window


def report_outcome(outcome: Outcome):
    print(f"\n{'='*40}")
    print(f"{outcome.winner.value.upper()} wins: {outcome.banner}")
    print(f"{'='*40}\n")


def main():
    parser = argparse.ArgumentParser(description="Two-player local duel")
    parser.add_argument(
        "--width",
        type=int,
        default=WINDOW_CONFIG["width"],
        help=f"Playfield width (default: {WINDOW_CONFIG['width']})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=WINDOW_CONFIG["height"],
        help=f"Playfield height (default: {WINDOW_CONFIG['height']})",
    )
    parser.add_argument(
        "--opponent",
        type=str,
        default=None,
        choices=OPPONENTS,
        help="Pick the right-hand opponent and skip the start screen",
    )
    parser.add_argument(
        "--tick-rate",
        type=int,
        default=RULES_CONFIG["tick_rate"],
        help=f"Logical simulation ticks per second (default: {RULES_CONFIG['tick_rate']})",
    )
    parser.add_argument(
        "--variable-step",
        action="store_true",
        help="Run one tick per rendered frame instead of a fixed tick rate",
    )

    args = parser.parse_args()

    rules = Rules(**{**RULES_CONFIG, "tick_rate": args.tick_rate})
    session = DuelSession(
        width=args.width,
        height=args.height,
        rules=rules,
        fixed_step=not args.variable_step,
        on_session_end=report_outcome,
    )

    print("Left:  W/S move, D fire")
    print("Right: Up/Down move, Left fire")
    print("Enter restarts after a round, Esc quits.")

    run_window(session, opponent=args.opponent)


if __name__ == "__main__":
    main()
