"""Tree invariants that hold after any search."""

import pytest
from mcts_engine import MCTS, MCTSTree, SearchConfig
from mcts_engine.mcts.ucb import ucb_select


CASES = [(seed, iterations, epsilon)
         for seed in (0, 1, 2)
         for iterations in (1, 5, 30, 120)
         for epsilon in (0.0, 0.1, 1.0)]


@pytest.mark.parametrize("seed,iterations,epsilon", CASES)
def test_visit_accounting(nim_factory, seed, iterations, epsilon):
    """Each node's visits cover its children's plus its own playouts."""
    root = MCTS(SearchConfig(seed=seed, epsilon=epsilon)).build_tree(
        nim_factory(pile=9), iterations)

    assert root.visit_count == iterations
    for node in MCTSTree(root).iter_nodes():
        child_visits = sum(child.visit_count for child in node.children)
        assert node.visit_count >= child_visits
        assert node.visit_count >= 1
        # Results are bounded by 1 in magnitude
        assert abs(node.total_value) <= node.visit_count + 1e-9


@pytest.mark.parametrize("seed,iterations,epsilon", CASES)
def test_children_are_distinct_successors(nim_factory, seed, iterations, epsilon):
    root = MCTS(SearchConfig(seed=seed, epsilon=epsilon)).build_tree(
        nim_factory(pile=9), iterations)

    for node in MCTSTree(root).iter_nodes():
        successors = node.state.get_next_states()
        states = [child.state for child in node.children]
        assert len(states) <= len(successors)
        for i, state in enumerate(states):
            assert state in successors
            assert state not in states[:i]
        # Children appear in successor order
        assert states == successors[:len(states)]


@pytest.mark.parametrize("seed", range(5))
def test_selection_stop_condition(nim_factory, seed):
    """Selection never stops at a fully expanded non-terminal node."""
    mcts = MCTS(SearchConfig(seed=seed))
    root = mcts.build_tree(nim_factory(pile=6), 40)

    selected = ucb_select(root, mcts.config.exploration_weight)

    assert selected.is_terminal() or not selected.is_fully_expanded()


@pytest.mark.parametrize("seed", range(3))
def test_rollouts_bounded_on_endless_game(counter_state, seed):
    mcts = MCTS(SearchConfig(seed=seed, epsilon=0.5, heuristic_depth=1))
    root = mcts.build_tree(counter_state, 15)

    assert mcts.policy.last_steps == 100
    # A playout from a node at depth d returns d + 100
    nodes = list(MCTSTree(root).iter_nodes())
    bound = max(node.state.steps for node in nodes) + 100
    for node in nodes:
        assert abs(node.total_value) <= node.visit_count * bound
