"""Pytest fixtures for testing."""

import pytest
import numpy as np

from mcts_engine import GameState


class ExplicitState(GameState):
    """Hand-built game tree node.

    Terminal when it has no children unless ``terminal`` says otherwise,
    so a stuck position is ``ExplicitState(..., terminal=False)``.
    Equality is by label.
    """

    def __init__(self, label, player=1, value=0.0, heuristic=None, children=(), terminal=None):
        self.label = label
        self.player = player
        self.value = value
        self.heuristic = value if heuristic is None else heuristic
        self.children = tuple(children)
        self.terminal = (not self.children) if terminal is None else terminal

    def get_next_states(self):
        if self.terminal:
            return []
        return list(self.children)

    def is_terminal(self):
        return self.terminal

    def evaluate(self):
        return self.value

    def get_heuristic_value(self):
        return self.heuristic

    def get_current_player(self):
        return self.player

    def copy(self):
        return ExplicitState(self.label, self.player, self.value, self.heuristic,
                             self.children, self.terminal)

    def __eq__(self, other):
        return isinstance(other, ExplicitState) and self.label == other.label

    def __hash__(self):
        return hash(self.label)

    def __repr__(self):
        return f"ExplicitState({self.label!r})"


class CounterState(GameState):
    """Game that never ends: each move adds 1 or 2 to a counter.

    ``evaluate`` returns the number of moves made, which exposes how far
    a playout went. Successors are fresh objects on every call.
    """

    def __init__(self, total=0, steps=0):
        self.total = total
        self.steps = steps

    def get_next_states(self):
        return [CounterState(self.total + 1, self.steps + 1),
                CounterState(self.total + 2, self.steps + 1)]

    def is_terminal(self):
        return False

    def evaluate(self):
        return float(self.steps)

    def get_heuristic_value(self):
        return 0.0

    def get_current_player(self):
        return 1 if self.steps % 2 == 0 else 2

    def copy(self):
        return CounterState(self.total, self.steps)

    def __eq__(self, other):
        return (isinstance(other, CounterState)
                and (self.total, self.steps) == (other.total, other.steps))

    def __hash__(self):
        return hash((self.total, self.steps))

    def __repr__(self):
        return f"CounterState(total={self.total}, steps={self.steps})"


class NimState(GameState):
    """Single-pile Nim: take 1-3 stones, taking the last stone wins.

    Values are from player 1's point of view.
    """

    def __init__(self, pile=7, player=1):
        self.pile = pile
        self.player = player

    def get_next_states(self):
        other = 2 if self.player == 1 else 1
        return [NimState(self.pile - take, other)
                for take in (1, 2, 3) if take <= self.pile]

    def is_terminal(self):
        return self.pile == 0

    def evaluate(self):
        if self.pile == 0:
            # Player to move has nothing left: the other player took the last stone
            return 1.0 if self.player == 2 else -1.0
        return self.get_heuristic_value()

    def get_heuristic_value(self):
        if self.pile == 0:
            return self.evaluate()
        mover_sign = 1.0 if self.player == 1 else -1.0
        # Multiples of 4 lose for the mover
        return -0.5 * mover_sign if self.pile % 4 == 0 else 0.5 * mover_sign

    def get_current_player(self):
        return self.player

    def copy(self):
        return NimState(self.pile, self.player)

    def __eq__(self, other):
        return (isinstance(other, NimState)
                and (self.pile, self.player) == (other.pile, other.player))

    def __hash__(self):
        return hash((self.pile, self.player))

    def __repr__(self):
        return f"NimState(pile={self.pile}, player={self.player})"


@pytest.fixture
def seed():
    """Random seed for reproducibility."""
    return 42


@pytest.fixture
def rng(seed):
    """Seeded random generator."""
    return np.random.default_rng(seed)


@pytest.fixture
def make_state():
    """Factory for hand-built game tree states."""
    return ExplicitState


@pytest.fixture
def one_ply_game():
    """Player 1 to move with a losing and a winning terminal successor."""
    lose = ExplicitState("lose", player=2, value=-1.0)
    win = ExplicitState("win", player=2, value=1.0)
    root = ExplicitState("root", player=1, value=0.0, children=(lose, win))
    return root, win, lose


@pytest.fixture
def counter_state():
    """Start of a game that never terminates."""
    return CounterState()


@pytest.fixture
def nim_state():
    """Nim position with seven stones, player 1 to move."""
    return NimState(pile=7, player=1)


@pytest.fixture
def nim_factory():
    return NimState
