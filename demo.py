#!/usr/bin/env python3
"""Watch a random agent play a few games of Minesweeper in the terminal."""
import argparse
import os
import time

from minesweeper.game import BoardConfig, MinesweeperEnv
from minesweeper.agents import RandomAgent


def clear_screen() -> None:
    os.system('cls' if os.name == 'nt' else 'clear')


def show(env: MinesweeperEnv, header: str, footer: str = "") -> None:
    clear_screen()
    print(header)
    print(env.render())
    if footer:
        print(footer)


def play_game(env: MinesweeperEnv, agent: RandomAgent, title: str,
              delay: float) -> bool:
    """Play one game move by move. Returns True on a win."""
    obs, _ = env.reset()
    agent.reset()
    show(env, title)
    time.sleep(delay)

    moves = 0
    while env.session.is_playing:
        action = agent.select_action(obs, env.get_action_mask())
        is_flag, (x, y) = env.decode_action(action)
        obs, _, _, _, _ = env.step(action)
        moves += 1

        verb = "flag" if is_flag else "open"
        show(env, f"{title} | move {moves}: {verb} ({x}, {y})",
             f"{env.session.board.remaining_bombs} bombs unflagged")
        time.sleep(delay)

    print("\n*** WIN ***" if env.session.is_won else "\n*** BOOM ***")
    return env.session.is_won


def demo(delay: float = 0.3, games: int = 5, size: int = 8,
         bombs: int = 5) -> None:
    config = BoardConfig.clamped(size, size, bombs)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    agent = RandomAgent(config.width, config.height, flag_probability=0.2)

    print(f"{config.width}x{config.height} board, {config.num_bombs} bombs")
    time.sleep(2)

    wins = 0
    for game in range(1, games + 1):
        title = f"Game {game}/{games} (won {wins})"
        wins += play_game(env, agent, title, delay)
        time.sleep(1.0)

    print(f"\nWon {wins} of {games} ({100 * wins / games:.0f}%)")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--delay", type=float, default=0.3,
                        help="Seconds between moves")
    parser.add_argument("--games", type=int, default=5)
    parser.add_argument("--size", type=int, default=8,
                        help="Side length of the square board")
    parser.add_argument("--bombs", type=int, default=None,
                        help="Bomb count (default: a tenth of the cells)")
    args = parser.parse_args()

    bombs = args.bombs or max(1, args.size * args.size // 10)
    demo(delay=args.delay, games=args.games, size=args.size, bombs=bombs)
