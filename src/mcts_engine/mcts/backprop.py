"""Backpropagation for game MCTS.

Two-player, zero-sum convention: one signed scalar per playout, negated
at every ply on the way up. Only valid for exactly two alternating
parties.
"""

from .node import Node


def backpropagate(node: Node, result: float) -> None:
    """Backpropagate result from node to root.

    Args:
        node: Node the playout started from
        result: Playout result, credited to ``node`` as-is
    """
    current = node

    while current is not None:
        current.update(result)
        result = -result
        current = current.parent
