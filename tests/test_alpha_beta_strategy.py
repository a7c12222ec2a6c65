import unittest

import numpy as np

from AlphaBetaStrategy import AlphaBetaStrategy
from config import PRESETS, SearchConfig
from HeuristicEvaluator import HeuristicEvaluator
from ReversiState import Disc, ReversiState

EVERYTHING = SearchConfig(max_depth=1, use_coin_parity=True, use_actual_mobility=True,
                          use_potential_mobility=True, use_corner_score=True,
                          use_stability_score=True)


def with_depth(config, depth):
    return SearchConfig(
        max_depth=depth,
        use_coin_parity=config.use_coin_parity,
        use_actual_mobility=config.use_actual_mobility,
        use_potential_mobility=config.use_potential_mobility,
        use_corner_score=config.use_corner_score,
        use_stability_score=config.use_stability_score,
    )


def minimax(state, depth, evaluator):
    """Plain minimax over the same tree, no pruning."""
    if depth == 0:
        return evaluator.evaluate(state.board)
    moves = state.get_legal_moves()
    if not moves:
        passed = state.pass_turn()
        if not passed.get_legal_moves():
            return evaluator.evaluate(state.board)
        return minimax(passed, depth - 1, evaluator)
    values = [minimax(state.apply_action(move), depth - 1, evaluator) for move in moves]
    return max(values) if state.to_play == Disc.FIRST else min(values)


def minimax_root(state, config):
    evaluator = HeuristicEvaluator(config)
    moves = state.get_legal_moves()
    depth = max(config.max_depth - 1, 0)
    values = [minimax(state.apply_action(move), depth, evaluator) for move in moves]
    best = max(values) if state.to_play == Disc.FIRST else min(values)
    return best, moves[values.index(best)]


def random_playout(rng, plies):
    state = ReversiState()
    for _ in range(plies):
        moves = state.get_legal_moves()
        if not moves:
            if state.is_terminal():
                break
            state = state.pass_turn()
            continue
        state = state.apply_action(moves[rng.integers(len(moves))])
    if not state.get_legal_moves() and not state.is_terminal():
        state = state.pass_turn()
    return state


class TestAlphaBetaStrategy(unittest.TestCase):
    def test_matches_unpruned_minimax(self):
        rng = np.random.default_rng(2024)
        positions = [random_playout(rng, plies) for plies in (0, 5, 12, 21)]
        for state in positions:
            for base in (EVERYTHING, PRESETS["normal"]):
                for depth in (1, 2, 3):
                    config = with_depth(base, depth)
                    with self.subTest(position=state.to_str(), to_play=state.to_play, depth=depth):
                        expected_score, expected_move = minimax_root(state, config)
                        score, move = AlphaBetaStrategy(config)._search_driver(state)
                        self.assertEqual(move, expected_move)
                        self.assertEqual(score, expected_score)

    def test_depth_zero_picks_best_immediate_child(self):
        rng = np.random.default_rng(9)
        config = with_depth(EVERYTHING, 0)
        evaluator = HeuristicEvaluator(config)
        for plies in (3, 8, 15):
            state = random_playout(rng, plies)
            moves = state.get_legal_moves()
            if not moves:
                continue
            values = [evaluator.evaluate(state.apply_action(move).board) for move in moves]
            best = max(values) if state.to_play == Disc.FIRST else min(values)

            score, move = AlphaBetaStrategy(config)._search_driver(state)
            self.assertEqual(score, best)
            self.assertEqual(move, moves[values.index(best)])

    def test_double_pass_ignores_remaining_depth(self):
        board = np.zeros((8, 8), dtype=np.int8)
        board[0, :] = Disc.FIRST
        board[7, 7] = Disc.FIRST
        state = ReversiState(board, Disc.SECOND)
        strategy = AlphaBetaStrategy(with_depth(EVERYTHING, 5))
        inf = float('inf')

        shallow = strategy._alphabeta(state, 0, -inf, inf)
        deep = strategy._alphabeta(state, 5, -inf, inf)
        self.assertEqual(shallow, deep)
        self.assertEqual(deep, HeuristicEvaluator(EVERYTHING).evaluate(board))

    def test_pass_hands_the_turn_over(self):
        board = np.zeros((8, 8), dtype=np.int8)
        board[0, 0] = Disc.FIRST
        board[0, 1] = Disc.SECOND
        state = ReversiState(board, Disc.SECOND)
        self.assertEqual(state.get_legal_moves(), [])

        strategy = AlphaBetaStrategy(with_depth(EVERYTHING, 2))
        inf = float('inf')
        value = strategy._alphabeta(state, 2, -inf, inf)

        after_pass = ReversiState(board, Disc.FIRST).apply_action((0, 2))
        self.assertEqual(value, strategy._alphabeta(state.pass_turn(), 1, -inf, inf))
        self.assertEqual(value, HeuristicEvaluator(EVERYTHING).evaluate(after_pass.board))

    def test_no_legal_move_at_root(self):
        board = np.zeros((8, 8), dtype=np.int8)
        board[0, 0] = Disc.FIRST
        board[0, 1] = Disc.SECOND
        strategy = AlphaBetaStrategy(with_depth(EVERYTHING, 3))

        score, move = strategy._search_driver(ReversiState(board, Disc.SECOND))
        self.assertIsNone(move)
        self.assertEqual(score, HeuristicEvaluator(EVERYTHING).evaluate(board))

    def test_single_legal_move_is_played(self):
        board = np.zeros((8, 8), dtype=np.int8)
        board[7, 7] = Disc.FIRST
        board[6, 7] = Disc.SECOND
        strategy = AlphaBetaStrategy(PRESETS["easy"])

        self.assertEqual(strategy.best_move(ReversiState(board, Disc.FIRST)), (5, 7))
        self.assertGreater(strategy.nodes, 0)

    def test_nodes_are_counted_per_search(self):
        strategy = AlphaBetaStrategy(with_depth(EVERYTHING, 2))
        state = ReversiState()
        strategy.best_move(state)
        first_count = strategy.nodes
        strategy.best_move(state)
        self.assertEqual(strategy.nodes, first_count)


if __name__ == '__main__':
    unittest.main()
