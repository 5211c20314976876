"""Bounded-depth heuristic lookahead.

A single heuristic reading is noisy. The evaluator looks a few plies
ahead minimax-style and blends the best-response value with the state's
own estimate:

    value(s, d) = w_look * best(value(s', d - 1) for s' in next(s))
                  + w_own * h(s)

with best = max when the mover of s is the maximizing player, else min.
At d = 0, on terminal states and on states without successors the value
is h(s) itself.
"""

from typing import Optional, Sequence

from ..state import GameState


class HeuristicEvaluator:
    """Minimax-style lookahead over ``get_heuristic_value``."""

    def __init__(
        self,
        depth: int = 3,
        lookahead_weight: float = 0.7,
        heuristic_weight: float = 0.3,
        maximizing_player: int = 1
    ):
        """
        Args:
            depth: Default lookahead depth
            lookahead_weight: Weight of the best successor value
            heuristic_weight: Weight of the state's own heuristic value
            maximizing_player: Mover identity that maximizes
        """
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")
        self.depth = depth
        self.lookahead_weight = lookahead_weight
        self.heuristic_weight = heuristic_weight
        self.maximizing_player = maximizing_player

    def is_maximizing(self, state: GameState) -> bool:
        return state.get_current_player() == self.maximizing_player

    def evaluate(self, state: GameState, depth: Optional[int] = None) -> float:
        """Blended lookahead value of ``state``.

        Args:
            state: Position to score
            depth: Remaining plies (defaults to ``self.depth``)

        Returns:
            Blended heuristic value
        """
        if depth is None:
            depth = self.depth

        if depth == 0 or state.is_terminal():
            return state.get_heuristic_value()

        next_states = state.get_next_states()
        if not next_states:
            return state.get_heuristic_value()

        values = [self.evaluate(s, depth - 1) for s in next_states]
        best_value = max(values) if self.is_maximizing(state) else min(values)

        return (self.lookahead_weight * best_value
                + self.heuristic_weight * state.get_heuristic_value())

    def select(
        self,
        next_states: Sequence[GameState],
        mover: int
    ) -> GameState:
        """Pick the successor the mover prefers.

        Args:
            next_states: Non-empty list of successors
            mover: Identity of the player choosing among them

        Returns:
            Successor with the highest value for the maximizing player,
            lowest otherwise. Ties keep the earliest successor.
        """
        maximize = mover == self.maximizing_player
        best_state = None
        best_value = float('-inf') if maximize else float('inf')

        for state in next_states:
            value = self.evaluate(state)
            if maximize and value > best_value:
                best_value = value
                best_state = state
            elif not maximize and value < best_value:
                best_value = value
                best_state = state

        # Every value was +/-inf against the starting bound
        if best_state is None:
            best_state = next_states[0]

        return best_state
