"""Search configuration."""

import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


@dataclass
class SearchConfig:
    """Configuration for MCTS search.

    Defaults reproduce the engine's fixed constants.
    """
    exploration_weight: float = math.sqrt(2)
    epsilon: float = 0.1
    heuristic_depth: int = 3
    max_rollout_steps: int = 100
    lookahead_weight: float = 0.7
    heuristic_weight: float = 0.3
    maximizing_player: int = 1
    # Iterations between progress log lines, 0 disables them
    log_interval: int = 100
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate configuration values."""
        if self.exploration_weight < 0:
            raise ValueError("exploration_weight must be non-negative")
        if not 0.0 <= self.epsilon <= 1.0:
            raise ValueError("epsilon must be in [0, 1]")
        if self.heuristic_depth < 0:
            raise ValueError("heuristic_depth must be non-negative")
        if self.max_rollout_steps < 0:
            raise ValueError("max_rollout_steps must be non-negative")
        if self.log_interval < 0:
            raise ValueError("log_interval must be non-negative")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchConfig":
        """Build a config, rejecting keys it does not know."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown search config keys: {', '.join(unknown)}")
        return cls(**data)


def load_config(path: Union[str, Path]) -> SearchConfig:
    """Load a search config from YAML.

    The file holds the fields directly or under a top-level ``search:``
    mapping. An empty file gives the defaults.

    Args:
        path: YAML file path

    Returns:
        SearchConfig
    """
    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return SearchConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    if "search" in data:
        data = data["search"] or {}
        if not isinstance(data, dict):
            raise ValueError(f"'search' section in {path} must be a mapping")

    return SearchConfig.from_dict(data)
