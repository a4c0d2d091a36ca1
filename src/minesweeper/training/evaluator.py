"""
Evaluation module for Minesweeper agents.

Plays batches of games and reports aggregate results.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from ..game.environment import MinesweeperEnv
from ..game.session import BoardConfig
from ..agents.base_agent import BaseAgent


# ============================================================================
# Episode Statistics
# ============================================================================

@dataclass
class EpisodeStats:
    """Statistics for a single episode."""

    total_reward: float = 0.0
    steps: int = 0
    won: bool = False
    lost: bool = False
    opened_cells: int = 0


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare multiple agents.

    Provides standardized evaluation across different agent types.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: int = 500,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of evaluation episodes.
            max_steps: Maximum steps per episode.
            seed: Seed for the first episode's board; later episodes
                continue from the same generator.
        """
        if num_episodes < 1:
            raise ValueError("num_episodes must be positive")
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps
        self.seed = seed

    def run_episode(
        self, env: MinesweeperEnv, agent: BaseAgent, seed: Optional[int] = None
    ) -> EpisodeStats:
        """Play one game to completion or until max_steps."""
        stats = EpisodeStats()

        observation, _ = env.reset(seed=seed)
        agent.reset()

        for _ in range(self.max_steps):
            valid_actions = env.get_action_mask()
            action = agent.select_action(observation, valid_actions)

            observation, reward, terminated, truncated, info = env.step(action)

            stats.total_reward += float(reward)
            stats.steps += 1
            stats.opened_cells = info.get("opened", 0)

            if terminated or truncated:
                stats.won = info.get("game_state") == "WON"
                stats.lost = info.get("game_state") == "LOST"
                break

        return stats

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with evaluation metrics.
        """
        env = MinesweeperEnv(config=self.board_config)

        wins = 0
        losses = 0
        total_reward = 0.0
        total_steps = 0
        total_opened = 0

        for episode in range(self.num_episodes):
            seed = self.seed if episode == 0 else None
            stats = self.run_episode(env, agent, seed=seed)

            wins += stats.won
            losses += stats.lost
            total_reward += stats.total_reward
            total_steps += stats.steps
            total_opened += stats.opened_cells

        return {
            "win_rate": wins / self.num_episodes,
            "loss_rate": losses / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_opened": total_opened / self.num_episodes,
        }

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            print(f"Evaluating {name}...")
            results[name] = self.evaluate(agent)
        return results
