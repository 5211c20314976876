"""MCTS decision engine for two-player, zero-sum, perfect-information games.

Given a position and an iteration budget, recommend the next position.

Components:
- state - GameState interface the engine searches through
- mcts/ - Node, UCB selection, expansion, rollout, backprop, search
- config - SearchConfig and YAML loading
"""

__version__ = "0.1.0"

from .state import GameState
from .config import SearchConfig, load_config
from .mcts.search import MCTS, search
from .mcts.node import Node
from .mcts.tree import MCTSTree

__all__ = [
    "GameState",
    "SearchConfig",
    "load_config",
    "MCTS",
    "search",
    "Node",
    "MCTSTree"
]
