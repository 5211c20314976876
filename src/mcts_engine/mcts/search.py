"""Main MCTS search for two-player games.

def iterate(root):
    node = ucb_select(root)
    child = expand(node)
    result = rollout(child.state)
    backprop(child, result)

Repeat for the iteration budget, then recommend the root child with the
best mean result. The tree lives for one call only.
"""

import logging
from typing import Optional

import numpy as np

from ..config import SearchConfig
from ..state import GameState
from .backprop import backpropagate
from .expansion import expand
from .heuristic import HeuristicEvaluator
from .node import Node
from .rollout import DEAD_END, TERMINAL, RolloutPolicy
from .tree import MCTSTree
from .ucb import best_child, ucb_select

logger = logging.getLogger(__name__)


def iterate(
    root: Node,
    policy: RolloutPolicy,
    exploration_weight: float
) -> Node:
    """Single MCTS iteration.

    1. UCB select from root
    2. Expand one new child (or reuse the node if nothing to expand)
    3. Roll out from the expanded node
    4. Backpropagate with alternating sign

    Returns:
        The node the rollout started from
    """
    node = ucb_select(root, exploration_weight)
    expanded = expand(node)
    result = policy.simulate(expanded.state)
    backpropagate(expanded, result)
    return expanded


class MCTS:
    """Monte Carlo Tree Search with an epsilon-greedy heuristic rollout.

    Runs strictly sequentially on the caller's thread and stops only when
    the iteration budget is spent.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        rng: Optional[np.random.Generator] = None
    ):
        self.config = config or SearchConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.evaluator = HeuristicEvaluator(
            depth=self.config.heuristic_depth,
            lookahead_weight=self.config.lookahead_weight,
            heuristic_weight=self.config.heuristic_weight,
            maximizing_player=self.config.maximizing_player
        )
        self.policy = RolloutPolicy(
            evaluator=self.evaluator,
            rng=self.rng,
            epsilon=self.config.epsilon,
            max_steps=self.config.max_rollout_steps
        )

        self._reset_statistics()

    def _reset_statistics(self):
        self.num_iterations = 0
        self.num_expansions = 0
        self.num_terminal_rollouts = 0
        self.num_truncated_rollouts = 0
        self.num_dead_end_rollouts = 0
        self.total_nodes = 0
        self.max_depth = 0

    def build_tree(self, initial_state: GameState, iterations: int) -> Node:
        """Run the search and return the root of the tree it grew.

        Args:
            initial_state: Position to search from
            iterations: Iteration budget, at least 1

        Returns:
            Root node wrapping ``initial_state``
        """
        if isinstance(iterations, bool) or not isinstance(iterations, (int, np.integer)):
            raise ValueError(f"iterations must be an integer, got {iterations!r}")
        if iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {iterations}")

        self._reset_statistics()
        root = Node(state=initial_state)
        interval = self.config.log_interval

        logger.debug("Starting search: %d iterations", iterations)

        for i in range(iterations):
            expanded = iterate(root, self.policy, self.config.exploration_weight)

            self.num_iterations += 1
            if expanded.visit_count == 1 and expanded is not root:
                self.num_expansions += 1
            if self.policy.last_stop == TERMINAL:
                self.num_terminal_rollouts += 1
            elif self.policy.last_stop == DEAD_END:
                self.num_dead_end_rollouts += 1
            else:
                self.num_truncated_rollouts += 1

            if interval and (i + 1) % interval == 0:
                stats = MCTSTree(root).get_statistics()
                logger.debug(
                    "Iteration %d/%d: nodes=%d, root visits=%d, Q=%.3f",
                    i + 1, iterations, stats["total_nodes"],
                    stats["root_visits"], stats["root_Q"]
                )

        tree = MCTSTree(root)
        self.total_nodes = tree.count_nodes()
        self.max_depth = tree.max_depth()

        logger.debug(
            "Search done: nodes=%d, depth=%d, truncated rollouts=%d",
            self.total_nodes, self.max_depth, self.num_truncated_rollouts
        )

        return root

    def recommend(self, root: Node) -> GameState:
        """Root child with the best mean result, or the root state if none."""
        child = best_child(root, 0.0)
        if child is None:
            return root.state
        return child.state

    def search(self, initial_state: GameState, iterations: int) -> GameState:
        """Search and return the recommended next position.

        An initial state that is terminal (or has no successors) is
        returned as-is.

        Args:
            initial_state: Position to search from
            iterations: Iteration budget, at least 1

        Returns:
            Recommended successor state
        """
        root = self.build_tree(initial_state, iterations)
        return self.recommend(root)

    def get_statistics(self) -> dict:
        """Return statistics of the latest search."""
        return {
            "num_iterations": self.num_iterations,
            "num_expansions": self.num_expansions,
            "num_terminal_rollouts": self.num_terminal_rollouts,
            "num_truncated_rollouts": self.num_truncated_rollouts,
            "num_dead_end_rollouts": self.num_dead_end_rollouts,
            "total_nodes": self.total_nodes,
            "max_depth": self.max_depth
        }


def search(
    initial_state: GameState,
    iterations: int,
    config: Optional[SearchConfig] = None,
    rng: Optional[np.random.Generator] = None
) -> GameState:
    """Recommend the next position from ``initial_state``.

    Args:
        initial_state: Position to search from
        iterations: Iteration budget, at least 1
        config: Search settings (defaults if None)
        rng: Random source for rollouts (seeded from config if None)

    Returns:
        Recommended successor state
    """
    return MCTS(config=config, rng=rng).search(initial_state, iterations)
