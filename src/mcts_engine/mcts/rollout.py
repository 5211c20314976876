"""Epsilon-greedy rollout policy.

Each playout step explores with probability epsilon (uniform random
successor) and otherwise exploits the heuristic lookahead.
"""

from typing import Optional, Sequence

import numpy as np

from ..state import GameState
from .heuristic import HeuristicEvaluator


# Why a playout stopped
TERMINAL = "terminal"
DEAD_END = "dead_end"
TRUNCATED = "truncated"


class RolloutPolicy:
    """Epsilon-greedy playout from a state to a terminal or capped state."""

    def __init__(
        self,
        evaluator: HeuristicEvaluator,
        rng: np.random.Generator,
        epsilon: float = 0.1,
        max_steps: int = 100
    ):
        """
        Args:
            evaluator: Heuristic lookahead used for exploitation steps
            rng: Random source for the epsilon draws
            epsilon: Probability of a uniformly random step
            max_steps: Cap on playout length
        """
        self.evaluator = evaluator
        self.rng = rng
        self.epsilon = epsilon
        self.max_steps = max_steps

        # Outcome of the latest playout
        self.last_steps = 0
        self.last_stop = TERMINAL

    def choose(self, state: GameState, next_states: Sequence[GameState]) -> GameState:
        """Choose the next state of the playout.

        On a greedy step the mover of ``state``, the position being advanced,
        decides: the maximizing player takes the highest lookahead value,
        anyone else the lowest. The movers of the successors are not consulted.
        """
        if self.rng.random() < self.epsilon:
            index = int(self.rng.integers(len(next_states)))
            return next_states[index]
        return self.evaluator.select(next_states, state.get_current_player())

    def simulate(self, state: GameState, max_steps: Optional[int] = None) -> float:
        """Play out from a copy of ``state``.

        Args:
            state: Starting position (not modified)
            max_steps: Override for the step cap

        Returns:
            Utility of the last state reached. When the cap stops a
            non-terminal playout its utility is used as-is.
        """
        if max_steps is None:
            max_steps = self.max_steps

        current = state.copy()
        steps = 0
        stop = TRUNCATED

        while steps < max_steps:
            if current.is_terminal():
                stop = TERMINAL
                break
            next_states = current.get_next_states()
            if not next_states:
                stop = DEAD_END
                break

            current = self.choose(current, next_states)
            steps += 1
        else:
            if current.is_terminal():
                stop = TERMINAL

        self.last_steps = steps
        self.last_stop = stop

        return current.evaluate()
