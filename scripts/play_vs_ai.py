#!/usr/bin/env python3
"""Play Reversi in the console, against a friend or the computer, with optional logging & replay."""

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List, Optional

from reversi import GameConfig, GameMode, GameSession, load_config
from reversi.core import Coordinate, legal_move_mask

logger = logging.getLogger("reversi.console")


def format_board(session: GameSession) -> str:
    state = session.snapshot()
    hints = None if state.is_terminal else legal_move_mask(state)
    black, white = session.disc_counts()
    return f"{state.render(hints)}\nBlack: {black}  White: {white}"


def parse_move(raw: str) -> Coordinate:
    raw = raw.strip()
    if "," in raw:
        row_text, col_text = raw.split(",", 1)
        return Coordinate(int(row_text), int(col_text))
    return Coordinate.from_field(raw)


def prompt_human_move(session: GameSession) -> Optional[Coordinate]:
    """Ask for a legal move; returns ``None`` when a new game was requested."""
    moves = session.legal_moves()
    print("Legal moves: " + " ".join(move.to_field() for move in moves))
    while True:
        raw = input("Your move (e.g. d3 or 2,3; n = new game, q = quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Goodbye.")
            sys.exit(0)
        if raw.lower() in {"n", "new"}:
            return None
        try:
            move = parse_move(raw)
        except ValueError:
            print("Could not read that move.")
            continue
        if move in moves:
            return move
        print("That move is not legal. Try again.")


def announce_result(session: GameSession) -> None:
    black, white = session.disc_counts()
    winner = session.winner
    print("\nGame over!")
    if winner is None:
        print("It's a draw!")
    else:
        print(f"{winner.display_name} wins!")
    print(f"Black: {black}  White: {white}")


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"Game log saved to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    session = GameSession()
    if verbose:
        print("Replaying logged game.")
        print(format_board(session))
    for entry in moves:
        move = Coordinate(*entry["position"])
        player = session.current_player
        if not session.apply_move(move):
            raise ValueError(
                f"Logged move {entry.get('move_index')} ({move.to_field()}) is not legal"
            )
        if verbose:
            actor = entry.get("actor", "unknown")
            print(f"{actor} ({player.display_name}) played {move.to_field()}")
            print(format_board(session))
    state = session.snapshot()
    summary = {
        "result": state.result.value,
        "moves": len(moves),
        "board": state.board.tolist(),
        "counts": list(session.disc_counts()),
    }
    if verbose:
        print("Replay finished.")
        print(f"Result: {summary['result']}")
    return summary


def play_interactive(config: GameConfig, log_file: Optional[str]) -> None:
    session = config.new_session()
    log_records: List[Dict] = []

    if session.mode == GameMode.HUMAN_VS_COMPUTER:
        print(
            f"Playing against the computer ({config.difficulty.display_name}), "
            f"computer plays {config.ai_player.display_name}."
        )

    while not session.is_game_over:
        player = session.current_player
        print("\nCurrent board:")
        print(format_board(session))
        print(f"To move: {player.display_name}")

        if session.is_ai_turn():
            time.sleep(config.ai_delay)
            move = session.play_ai_turn()
            actor = "ai"
            if move is None:
                break
            print(f"Computer ({player.display_name}) plays {move.to_field()}")
        else:
            move = prompt_human_move(session)
            if move is None:
                session.reset()
                log_records = []
                print("Starting a new game.")
                continue
            session.apply_move(move)
            actor = "human"

        record = session.history[-1]
        if record.passed_player is not None:
            print(f"{record.passed_player.display_name} has no legal move and passes.")
        log_records.append(
            {
                "move_index": len(log_records),
                "actor": actor,
                "player": player.name.lower(),
                "position": [move.row, move.col],
                "flipped": len(record.flipped),
            }
        )

    print("\nFinal board:")
    print(format_board(session))
    announce_result(session)

    if log_file:
        state = session.snapshot()
        metadata = {
            "mode": config.mode.value,
            "difficulty": config.difficulty.value,
            "ai_player": config.ai_player.name.lower(),
            "result": state.result.value,
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(log_file))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Reversi in the console.")
    parser.add_argument("--config", type=str, default="configs/game.yaml")
    parser.add_argument("--mode", choices=[mode.value for mode in GameMode])
    parser.add_argument("--difficulty", choices=["beginner", "professional"])
    parser.add_argument("--ai-player", choices=["black", "white"])
    parser.add_argument("--ai-delay", type=float)
    parser.add_argument("--log-level")
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    args = parser.parse_args()

    cfg = load_config(args.config)
    overrides = {
        "mode": args.mode if args.mode is not None else cfg.mode,
        "difficulty": args.difficulty if args.difficulty is not None else cfg.difficulty,
        "ai_player": args.ai_player if args.ai_player is not None else cfg.ai_player.name,
        "ai_delay": args.ai_delay if args.ai_delay is not None else cfg.ai_delay,
        "log_level": args.log_level if args.log_level is not None else cfg.log_level,
    }
    config = GameConfig.from_dict(overrides)
    logging.basicConfig(level=config.log_level)
    logger.debug("Using config %s", config)

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(config, args.log_file)


if __name__ == "__main__":
    main()
