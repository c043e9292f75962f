#!/usr/bin/env python3
"""Pit two computer players against each other and report the results."""

import argparse
import json
import logging

import numpy as np

from reversi.ai import Difficulty, HeuristicPolicy
from reversi.evaluation import RandomPolicy, evaluate_policies


def make_policy(name: str, rng: np.random.Generator):
    if name == "random":
        return RandomPolicy(rng)
    return HeuristicPolicy(Difficulty(name))


def main() -> None:
    choices = ["random"] + [difficulty.value for difficulty in Difficulty]
    parser = argparse.ArgumentParser()
    parser.add_argument("--black", choices=choices, default=Difficulty.PROFESSIONAL.value)
    parser.add_argument("--white", choices=choices, default=Difficulty.BEGINNER.value)
    parser.add_argument("--episodes", type=int, default=20)
    parser.add_argument("--opening-moves", type=int, default=4)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())
    rng = np.random.default_rng(args.seed)

    result = evaluate_policies(
        make_policy(args.black, rng),
        make_policy(args.white, rng),
        episodes=args.episodes,
        opening_moves=args.opening_moves,
        rng=rng,
    )

    output = {
        "games": result.games_played,
        "black_wins": result.black_wins,
        "white_wins": result.white_wins,
        "draws": result.draws,
        "average_length": result.average_length,
        "black_winrate": result.winrate_black(),
        "white_winrate": result.winrate_white(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
