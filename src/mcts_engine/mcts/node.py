"""MCTS node for game search."""

import weakref
from dataclasses import dataclass, field
from typing import List, Optional

from ..state import GameState


@dataclass(eq=False)
class Node:
    """MCTS node for game search.

    Each node owns one state snapshot and its children. The parent link is
    a weak reference used only to walk back up the tree.

    Attributes:
        state: Position this node stands for
        children: Child nodes in creation order
        visit_count: N - number of recorded outcomes
        total_value: W - sum of backpropagated results
    """
    state: GameState
    children: List['Node'] = field(default_factory=list)
    visit_count: int = 0
    total_value: float = 0.0
    _parent_ref: Optional[weakref.ref] = field(default=None, init=False, repr=False)

    @property
    def parent(self) -> Optional['Node']:
        """Parent node (None for root or once the parent is gone)."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def Q(self) -> float:
        """Average value (Q = W / N)."""
        if self.visit_count == 0:
            return 0.0
        return self.total_value / self.visit_count

    def is_terminal(self) -> bool:
        return self.state.is_terminal()

    def has_children(self) -> bool:
        return len(self.children) > 0

    def is_fully_expanded(self) -> bool:
        """Every successor of the state has been materialized as a child."""
        return len(self.children) >= len(self.state.get_next_states())

    def add_child(self, child: 'Node') -> None:
        """Add child node."""
        child._parent_ref = weakref.ref(self)
        self.children.append(child)

    def update(self, result: float) -> None:
        """Record one outcome."""
        self.visit_count += 1
        self.total_value += result

    def __repr__(self) -> str:
        return (f"Node(visits={self.visit_count}, "
                f"Q={self.Q:.3f}, children={len(self.children)})")
