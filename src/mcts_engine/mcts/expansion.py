"""Expansion step: materialize one new child per iteration."""

from .node import Node
from .ucb import best_child


def expand(node: Node) -> Node:
    """Attach the first successor not yet present as a child.

    Successors are compared to existing children with ``==``. Terminal and
    stuck nodes are returned unchanged.

    Args:
        node: Node returned by selection

    Returns:
        The new child, or ``node`` itself when there is nothing to expand
    """
    if node.is_terminal():
        return node

    next_states = node.state.get_next_states()
    if not next_states:
        return node

    existing = [child.state for child in node.children]

    for next_state in next_states:
        if next_state not in existing:
            child = Node(state=next_state)
            node.add_child(child)
            return child

    # Successors changed between calls; reuse what is already there
    return best_child(node, 0.0)
