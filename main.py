#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--preset NAME] [--width W --height H --bombs N] [--seed S]
    python main.py evaluate [--games N] [--flag-probability P]
    python main.py compare [--games N]
"""
import argparse
from typing import Optional, Tuple

from minesweeper.game import (
    BoardConfig,
    FlagResult,
    GameSession,
    OpenResult,
    PRESETS,
)
from minesweeper.agents import RandomAgent
from minesweeper.training import Evaluator


PLAY_HELP = """Commands:
  o X Y   open the cell in column X, row Y
  f X Y   toggle a flag on the cell in column X, row Y
  n       new game
  q       quit"""

RESULT_MESSAGES = {
    OpenResult.OPEN_SPACE_UNCOVERED: "Open space uncovered.",
    OpenResult.UNSAFE_SPACE_UNCOVERED: "Careful, bombs nearby.",
    OpenResult.BOMB_HIT: "Boom!",
    FlagResult.FLAG_PLACED: "Flag placed.",
    FlagResult.FLAG_REMOVED: "Flag removed.",
}


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Resolve a preset, then apply any explicit size or bomb overrides."""
    preset = PRESETS[args.preset]
    if args.width is None and args.height is None and args.bombs is None:
        return preset
    return BoardConfig.clamped(
        args.width if args.width is not None else preset.width,
        args.height if args.height is not None else preset.height,
        args.bombs if args.bombs is not None else preset.num_bombs,
    )


def parse_move(line: str) -> Optional[Tuple[str, Tuple[int, int]]]:
    """Parse 'o X Y' or 'f X Y' into (command, (x, y))."""
    parts = line.split()
    if len(parts) != 3 or parts[0] not in ("o", "f"):
        return None
    try:
        return parts[0], (int(parts[1]), int(parts[2]))
    except ValueError:
        return None


def print_board(session: GameSession) -> None:
    board = session.board
    print()
    print(board.render_text())
    print(
        f"Bombs left: {board.remaining_bombs} | "
        f"State: {session.game_state.name}"
    )


def play(args: argparse.Namespace) -> None:
    """Play a game in the terminal."""
    config = build_config(args)
    session = GameSession(config, rng=args.seed)

    print(f"Board: {config.width}x{config.height} with {config.num_bombs} bombs")
    print(PLAY_HELP)
    print_board(session)

    while True:
        try:
            line = input("> ").strip().lower()
        except EOFError:
            break

        if line == "q":
            break
        if line == "n":
            session.new_game()
            print_board(session)
            continue

        move = parse_move(line)
        if move is None:
            print(PLAY_HELP)
            continue

        command, pos = move
        if command == "o":
            result = session.open(pos)
        else:
            result = session.toggle_flag(pos)

        if result is None:
            print("Nothing happens.")
        else:
            print(RESULT_MESSAGES[result])
        print_board(session)

        if session.is_won:
            print("\n*** WIN! *** (n for a new game, q to quit)")
        elif session.is_lost:
            print("\n*** LOST (hit bomb) *** (n for a new game, q to quit)")


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random agent."""
    config = PRESETS[args.preset]
    agent = RandomAgent(
        config.width,
        config.height,
        flag_probability=args.flag_probability,
        seed=args.seed,
    )
    evaluate_agent(agent, "Random", config, args.games, args.seed)


def evaluate_agent(
    agent,
    name: str,
    config: BoardConfig = None,
    num_episodes: int = 100,
    seed: Optional[int] = None,
) -> None:
    """Evaluate a single agent and print results."""
    config = config or BoardConfig()
    evaluator = Evaluator(config, num_episodes=num_episodes, seed=seed)

    print(f"\nEvaluating {name} over {num_episodes} games...")
    results = evaluator.evaluate(agent)

    print(f"Results for {name}:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Loss rate: {results['loss_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg opened: {results['avg_opened']:.1f} cells")


def compare(args: argparse.Namespace) -> None:
    """Compare random agents with different flagging habits."""
    config = PRESETS[args.preset]

    agents = {
        f"Random (flag {probability:.0%})": RandomAgent(
            config.width, config.height, flag_probability=probability,
            seed=args.seed,
        )
        for probability in (0.0, 0.1, 0.3)
    }

    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)
    results = evaluator.compare(agents)

    print("\n" + "=" * 50)
    print("Agent Comparison Results")
    print("=" * 50)
    print(f"{'Agent':<20} {'Win Rate':<12} {'Avg Reward':<12} {'Avg Steps':<10}")
    print("-" * 50)

    for name, metrics in results.items():
        print(
            f"{name:<20} {metrics['win_rate']:>10.1%} "
            f"{metrics['avg_reward']:>10.2f} "
            f"{metrics['avg_steps']:>10.1f}"
        )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal or evaluate agents"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--preset", choices=sorted(PRESETS), default="default",
        help="Board preset",
    )
    play_parser.add_argument("--width", type=int, help="Board width (2-30)")
    play_parser.add_argument("--height", type=int, help="Board height (2-30)")
    play_parser.add_argument("--bombs", type=int, help="Bomb count (1-100)")
    play_parser.add_argument("--seed", type=int, help="Random seed")

    # Evaluate command
    eval_parser = subparsers.add_parser("evaluate", help="Evaluate an agent")
    eval_parser.add_argument(
        "--preset", choices=sorted(PRESETS), default="default",
        help="Board preset",
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument(
        "--flag-probability", type=float, default=0.1,
        help="Chance the random agent flags instead of opening",
    )
    eval_parser.add_argument("--seed", type=int, help="Random seed")

    # Compare command
    compare_parser = subparsers.add_parser("compare", help="Compare agents")
    compare_parser.add_argument(
        "--preset", choices=sorted(PRESETS), default="default",
        help="Board preset",
    )
    compare_parser.add_argument(
        "--games", type=int, default=100, help="Number of games per agent"
    )
    compare_parser.add_argument("--seed", type=int, help="Random seed")

    args = parser.parse_args()

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    elif args.command == "compare":
        compare(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
