"""MCTS tree inspection."""

from typing import List

import networkx as nx

from .node import Node


class MCTSTree:
    """Read-only view over a finished search tree."""

    def __init__(self, root: Node):
        self.root = root

    def iter_nodes(self):
        """Nodes in depth-first creation order."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def get_path_to_root(self, node: Node) -> List[Node]:
        """Get path from node to root."""
        path = []
        current = node
        while current is not None:
            path.append(current)
            current = current.parent
        return path

    def count_nodes(self) -> int:
        """Count total nodes."""
        return sum(1 for _ in self.iter_nodes())

    def count_terminal(self) -> int:
        """Count nodes holding a terminal state."""
        return sum(1 for node in self.iter_nodes() if node.is_terminal())

    def max_depth(self) -> int:
        """Depth of the deepest node (root is 0)."""
        deepest = 0
        stack = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            stack.extend((child, depth + 1) for child in node.children)
        return deepest

    def get_statistics(self) -> dict:
        """Get tree statistics."""
        return {
            "total_nodes": self.count_nodes(),
            "terminal_nodes": self.count_terminal(),
            "max_depth": self.max_depth(),
            "root_visits": self.root.visit_count,
            "root_Q": self.root.Q
        }

    def to_networkx(self) -> nx.DiGraph:
        """Export the tree as a directed graph.

        Graph nodes are integer ids in depth-first order (root is 0) with
        attributes ``visits``, ``value``, ``q``, ``player``, ``terminal``
        and ``label``; edges run parent to child.
        """
        graph = nx.DiGraph()
        ids = {}

        for node in self.iter_nodes():
            node_id = len(ids)
            ids[id(node)] = node_id
            graph.add_node(
                node_id,
                visits=node.visit_count,
                value=float(node.total_value),
                q=float(node.Q),
                player=int(node.state.get_current_player()),
                terminal=bool(node.is_terminal()),
                label=repr(node.state)
            )
            parent = node.parent
            if parent is not None:
                graph.add_edge(ids[id(parent)], node_id)

        return graph
