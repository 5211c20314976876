#!/usr/bin/env python3
"""Run one MCTS search on a user-supplied game.

The game is any GameState subclass whose constructor with no arguments
builds the starting position.

Usage:
    python experiments/run_search.py \
        --game mygame.rules:StartPosition \
        --iterations 1000 \
        --config configs/search.yaml \
        --export-tree tree.graphml
"""

import argparse
import dataclasses
import importlib
import logging

import networkx as nx

from mcts_engine import GameState, MCTS, MCTSTree, SearchConfig, load_config
from mcts_engine.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def load_game_class(path: str):
    """Import ``module:ClassName`` and check it is a GameState."""
    module_name, sep, class_name = path.partition(":")
    if not sep or not module_name or not class_name:
        raise ValueError(f"Expected module:ClassName, got {path!r}")

    module = importlib.import_module(module_name)
    game_class = getattr(module, class_name, None)
    if game_class is None:
        raise ValueError(f"{module_name} has no attribute {class_name}")
    if not (isinstance(game_class, type) and issubclass(game_class, GameState)):
        raise ValueError(f"{path} is not a GameState subclass")
    return game_class


def main():
    parser = argparse.ArgumentParser(description="Run MCTS search")
    parser.add_argument("--game", type=str, required=True,
                        help="GameState class as module:ClassName")
    parser.add_argument("--iterations", type=int, default=1000, help="Iteration budget")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (overrides config)")
    parser.add_argument("--export-tree", type=str, default=None,
                        help="Write the search tree as GraphML")
    parser.add_argument("--log-level", type=str, default="INFO")

    args = parser.parse_args()

    setup_logging(args.log_level)

    try:
        game_class = load_game_class(args.game)
    except (ImportError, ValueError) as e:
        parser.error(str(e))

    config = load_config(args.config) if args.config else SearchConfig()
    if args.seed is not None:
        config = dataclasses.replace(config, seed=args.seed)

    initial_state = game_class()
    mcts = MCTS(config=config)

    root = mcts.build_tree(initial_state, args.iterations)
    recommended = mcts.recommend(root)

    for key, value in mcts.get_statistics().items():
        logger.info("%s: %s", key, value)

    if args.export_tree:
        nx.write_graphml(MCTSTree(root).to_networkx(), args.export_tree)
        logger.info("Tree written to %s", args.export_tree)

    print(f"Recommended: {recommended!r}")


if __name__ == "__main__":
    main()
