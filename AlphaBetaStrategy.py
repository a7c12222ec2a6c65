import logging

from config import SearchConfig
from HeuristicEvaluator import HeuristicEvaluator
from ReversiState import Disc, ReversiState

logger = logging.getLogger(__name__)


class AlphaBetaStrategy:
    """
    A Reversi AI strategy using depth-limited minimax with alpha-beta pruning.
    FIRST is the maximizing side and SECOND the minimizing side. Game rules
    and state manipulation are delegated to ReversiState, leaf scoring to
    HeuristicEvaluator.
    """

    def __init__(self, config: SearchConfig):
        self.config = config
        self.evaluator = HeuristicEvaluator(config)
        self.nodes = 0

    # --- Public Interface ---

    def best_move(self, state: ReversiState):
        """Returns the chosen (row, col) for the player to move, or None if they must pass."""
        _, move = self._search_driver(state)
        return move

    # --- Core Search Logic ---

    def _search_driver(self, state: ReversiState):
        """
        Drives the alpha-beta search from the root. Returns (score, move);
        move is None when the player to move has no legal move.
        """
        self.nodes = 0
        alpha, beta = -float('inf'), float('inf')

        possible_moves = state.get_legal_moves()
        if not possible_moves:
            logger.debug("%s has no legal move at the root", state.to_play.name)
            return self._evaluate_board(state), None

        # At depth 0 the root still looks one move ahead.
        child_depth = max(self.config.max_depth - 1, 0)
        best_move = None

        for move in possible_moves:
            next_state = state.apply_action(move)
            score = self._alphabeta(next_state, child_depth, alpha, beta)

            if state.to_play == Disc.FIRST:
                if score > alpha:
                    alpha = score
                    best_move = move
            elif state.to_play == Disc.SECOND:
                if score < beta:
                    beta = score
                    best_move = move
            else:
                raise ValueError("player cannot be none")

        best_score = alpha if state.to_play == Disc.FIRST else beta
        logger.debug("%s plays %s (score %.3f, depth %d, %d nodes)",
                     state.to_play.name, best_move, best_score, self.config.max_depth, self.nodes)
        return best_score, best_move

    def _alphabeta(self, state: ReversiState, depth: int, alpha: float, beta: float) -> float:
        """Minimax with alpha-beta pruning, scored from FIRST's point of view."""
        self.nodes += 1

        if depth == 0:
            return self._evaluate_board(state)

        possible_moves = state.get_legal_moves()

        # Handle a pass move
        if not possible_moves:
            pass_state = state.pass_turn()
            if not pass_state.get_legal_moves():
                return self._evaluate_board(state)
            return self._alphabeta(pass_state, depth - 1, alpha, beta)

        # --- Recursive Step ---
        if state.to_play == Disc.FIRST:
            best_score = -float('inf')
            for move in possible_moves:
                next_state = state.apply_action(move)
                score = self._alphabeta(next_state, depth - 1, alpha, beta)

                best_score = max(best_score, score)
                alpha = max(alpha, score)

                if score >= beta:
                    break # Beta cutoff
            return best_score

        if state.to_play == Disc.SECOND:
            best_score = float('inf')
            for move in possible_moves:
                next_state = state.apply_action(move)
                score = self._alphabeta(next_state, depth - 1, alpha, beta)

                best_score = min(best_score, score)
                beta = min(beta, score)

                if score <= alpha:
                    break # Alpha cutoff
            return best_score

        raise ValueError("player cannot be none")

    # --- Heuristic Evaluation ---

    def _evaluate_board(self, state: ReversiState) -> float:
        return self.evaluator.evaluate(state.board)
