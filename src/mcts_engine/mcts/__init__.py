"""MCTS module: tree search over abstract game states.

Selection by UCB1, one child expanded per iteration, epsilon-greedy
heuristic rollouts, and sign-alternating backpropagation for two-player
zero-sum games.
"""

from .node import Node
from .tree import MCTSTree
from .ucb import ucb_select, ucb_score, best_child
from .expansion import expand
from .heuristic import HeuristicEvaluator
from .rollout import RolloutPolicy
from .backprop import backpropagate
from .search import MCTS, iterate

__all__ = [
    "Node",
    "MCTSTree",
    "ucb_select",
    "ucb_score",
    "best_child",
    "expand",
    "HeuristicEvaluator",
    "RolloutPolicy",
    "backpropagate",
    "MCTS",
    "iterate"
]
