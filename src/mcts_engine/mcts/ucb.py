"""UCB selection for game MCTS."""

import math
from typing import Optional

from .node import Node


def ucb_score(
    child: Node,
    parent: Node,
    c: float = math.sqrt(2)
) -> float:
    """Compute UCB score.

    UCB = Q + c * sqrt(ln(N_parent) / N_child)

    Args:
        child: Child node
        parent: Parent node
        c: Exploration constant

    Returns:
        UCB score (inf for an unvisited child)
    """
    if child.visit_count == 0:
        return float('inf')

    exploitation = child.Q
    exploration = c * math.sqrt(
        math.log(parent.visit_count) / child.visit_count
    )

    return exploitation + exploration


def best_child(node: Node, c: float) -> Optional[Node]:
    """Pick the child with the highest UCB score.

    The first unvisited child wins outright. Ties go to the child created
    first.

    Args:
        node: Parent node
        c: Exploration weight (0 for pure exploitation)

    Returns:
        Best child, or None if the node has no children
    """
    best = None
    best_score = float('-inf')

    for child in node.children:
        if child.visit_count == 0:
            return child

        score = ucb_score(child, node, c)
        if score > best_score:
            best_score = score
            best = child

    return best


def ucb_select(root: Node, c: float = math.sqrt(2)) -> Node:
    """Select the node to expand.

    Descend from root by UCB until reaching a terminal node, a node that
    still has unexpanded successors, or a non-terminal node with no
    successors at all.

    Args:
        root: Root node
        c: Exploration constant

    Returns:
        Selected node
    """
    node = root

    while not node.is_terminal():
        if not node.is_fully_expanded():
            return node

        child = best_child(node, c)
        if child is None:
            # Stuck: no successors to descend into
            break
        node = child

    return node
