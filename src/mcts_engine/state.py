"""Game state capability consumed by the search engine.

The engine never looks inside a position. Everything it needs comes
through this interface, so any two-player, zero-sum, perfect-information
game can be searched by implementing it.

Note: States are compared with ``==`` when deduplicating children during
expansion. ``__eq__`` must be value equality over the position, and
``get_next_states`` must return the same successors in the same order
every time it is called on an unchanged state.
"""

from abc import ABC, abstractmethod
from typing import Sequence


class GameState(ABC):
    """Base class for searchable game positions.

    States handed to the engine are treated as immutable. Mutating a state
    after it has been wrapped in a tree node breaks child deduplication.
    """

    @abstractmethod
    def get_next_states(self) -> Sequence["GameState"]:
        """
        Successor positions, in a stable order.

        Returns:
            Sequence of states reachable in one move. Empty if the state is
            terminal or the mover has no legal move.
        """
        pass

    @abstractmethod
    def is_terminal(self) -> bool:
        """Whether the game is over in this position."""
        pass

    @abstractmethod
    def evaluate(self) -> float:
        """
        Utility of the position.

        Used as the rollout result. It is also read on non-terminal states
        when a playout hits its step cap, so it should return a bounded
        estimate there rather than raise.
        """
        pass

    @abstractmethod
    def get_heuristic_value(self) -> float:
        """Bounded heuristic estimate, valid on any state."""
        pass

    @abstractmethod
    def get_current_player(self) -> int:
        """Identity of the player to move."""
        pass

    @abstractmethod
    def copy(self) -> "GameState":
        """Independent deep copy."""
        pass
