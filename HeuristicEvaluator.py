import numpy as np

from config import CORNERS, SearchConfig
from ReversiState import Disc, get_move_scores


def _normalized_difference(first, second) -> float:
    if first == 0 and second == 0:
        return 0.0
    return (first - second) / (first + second)


class HeuristicEvaluator:
    """
    Scores a board from the first player's point of view: positive favours
    FIRST, negative favours SECOND. Each feature is switched on or off by the
    SearchConfig and carries a fixed weight.
    """

    WEIGHT_COIN_PARITY = 15.0
    WEIGHT_ACTUAL_MOBILITY = 2.0
    WEIGHT_POTENTIAL_MOBILITY = 1.0
    WEIGHT_CORNERS = 18.0
    WEIGHT_STABILITY = 15.0

    STABILITY_MAP = np.array([
        [ 4, -3,  2,  2,  2,  2, -3,  4],
        [-3, -4, -1, -1, -1, -1, -4, -3],
        [ 2, -1,  1,  0,  0,  1, -1,  2],
        [ 2, -1,  0,  1,  1,  0, -1,  2],
        [ 2, -1,  0,  1,  1,  0, -1,  2],
        [ 2, -1,  1,  0,  0,  1, -1,  2],
        [-3, -4, -1, -1, -1, -1, -4, -3],
        [ 4, -3,  2,  2,  2,  2, -3,  4],
    ], dtype=np.int32)

    def __init__(self, config: SearchConfig):
        self.config = config

    def evaluate(self, board: np.ndarray) -> float:
        """Weighted sum of the enabled features."""
        first_scores = get_move_scores(Disc.FIRST, board)
        second_scores = get_move_scores(Disc.SECOND, board)

        score = 0.0
        if self.config.use_coin_parity:
            score += self.coin_parity(board) * self.WEIGHT_COIN_PARITY
        if self.config.use_actual_mobility:
            score += self.actual_mobility(first_scores, second_scores) * self.WEIGHT_ACTUAL_MOBILITY
        if self.config.use_potential_mobility:
            score += self.potential_mobility(board) * self.WEIGHT_POTENTIAL_MOBILITY
        if self.config.use_corner_score:
            score += self.corner_score(board, first_scores, second_scores) * self.WEIGHT_CORNERS
        if self.config.use_stability_score:
            score += self.stability_score(board) * self.WEIGHT_STABILITY
        return score

    # --- Features ---

    @staticmethod
    def coin_parity(board: np.ndarray) -> float:
        return float(np.count_nonzero(board == Disc.FIRST) - np.count_nonzero(board == Disc.SECOND))

    @staticmethod
    def actual_mobility(first_scores: np.ndarray, second_scores: np.ndarray) -> float:
        first_mobility = int(np.count_nonzero(first_scores > 0))
        second_mobility = int(np.count_nonzero(second_scores > 0))
        return _normalized_difference(first_mobility, second_mobility)

    @staticmethod
    def potential_mobility(board: np.ndarray) -> float:
        """
        An empty square next to a FIRST disc is potential mobility for SECOND,
        and one next to a SECOND disc is potential mobility for FIRST. Each
        square counts at most once per player.
        """
        size = board.shape[0]
        padded = np.pad(board, 1)
        near_first = np.zeros(board.shape, dtype=bool)
        near_second = np.zeros(board.shape, dtype=bool)
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                neighbours = padded[1 + dr:1 + dr + size, 1 + dc:1 + dc + size]
                near_first |= neighbours == Disc.FIRST
                near_second |= neighbours == Disc.SECOND

        empty = board == Disc.NONE
        first_mobility = int(np.count_nonzero(empty & near_second))
        second_mobility = int(np.count_nonzero(empty & near_first))
        return _normalized_difference(first_mobility, second_mobility)

    @staticmethod
    def corner_score(board: np.ndarray, first_scores: np.ndarray, second_scores: np.ndarray) -> float:
        first_score = 0
        second_score = 0
        for r, c in CORNERS:
            disc = board[r, c]
            if disc == Disc.FIRST:
                first_score += 2
            elif disc == Disc.SECOND:
                second_score += 2
            else:
                if first_scores[r, c] > 0:
                    first_score += 1
                if second_scores[r, c] > 0:
                    second_score += 1
        return _normalized_difference(first_score, second_score)

    @classmethod
    def stability_score(cls, board: np.ndarray) -> float:
        first_stability = np.sum(cls.STABILITY_MAP[board == Disc.FIRST])
        second_stability = np.sum(cls.STABILITY_MAP[board == Disc.SECOND])
        return float(first_stability - second_stability)
