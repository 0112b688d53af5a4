# scripts/play_hand.py
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Callable, List, Optional

from holdem_odds.engine.holdem_round import (
    MAX_PLAYERS,
    MIN_PLAYERS,
    Act,
    RoundState,
    Street,
    apply_action,
    deal_round,
    is_terminal,
    player_strength,
    showdown,
    street_probability,
    visible_community,
)
from holdem_odds.helpers.cards import format_cards
from holdem_odds.helpers.evaluator import describe
from holdem_odds.helpers.montecarlo import MONTE_CARLO_TRIALS


STREET_TITLE = {
    int(Street.PREFLOP): "Preflop",
    int(Street.FLOP): "Flop",
    int(Street.TURN): "Turn",
    int(Street.RIVER): "River",
}


def _ask_action(input_fn: Callable[[str], str]) -> int:
    while True:
        ans = input_fn("Enter your action (F to fold / C to continue): ").strip().upper()
        if ans.startswith("F"):
            return Act.FOLD
        if ans.startswith("C"):
            return Act.CONTINUE


def play(
    num_players: int,
    trials: int = MONTE_CARLO_TRIALS,
    seed: Optional[int] = None,
    auto: bool = False,
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[..., None] = print,
) -> Optional[int]:
    """
    Play one hand street by street. Returns the winning seat (0 = you),
    or None if you folded.
    """
    rng = random.Random(seed)
    st: RoundState = deal_round(num_players, rng=rng)

    print_fn("** Your Hand **")
    print_fn(format_cards(st.player_hand))

    while True:
        title = STREET_TITLE[int(st.street)]
        board = visible_community(st)
        if board:
            print_fn(f"** Community Cards ({title}) **")
            print_fn(format_cards(board))
            print_fn(f"Current hand: {describe(player_strength(st))}")

        pct = street_probability(st, trials=trials, rng=rng)
        print_fn(f"** {title} Probability of Winning **")
        print_fn(f"Your probability of winning against {num_players - 1} players is: {pct}%")

        if is_terminal(st):
            break

        act = Act.CONTINUE if auto else _ask_action(input_fn)
        st = apply_action(st, act)
        if st.folded:
            print_fn("You have folded. The game ends here.")
            return None

    seat = showdown(st)
    for i, h in enumerate(st.opponent_hands):
        print_fn(f"Bot {i + 2}: {format_cards(h)}")
    if seat == 0:
        print_fn("** Player 1 wins **")
    else:
        print_fn(f"** Bot {seat + 1} wins **")
    return seat


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Play one Texas Hold'em hand with live win odds.")
    ap.add_argument("--players", type=int, default=MIN_PLAYERS, help=f"table size ({MIN_PLAYERS}-{MAX_PLAYERS})")
    ap.add_argument("--trials", type=int, default=MONTE_CARLO_TRIALS, help="Monte Carlo trials per street")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--auto", action="store_true", help="never fold, no prompts")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        play(args.players, trials=args.trials, seed=args.seed, auto=args.auto)
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
