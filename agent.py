"""
Flat-board entry point for callers that keep the board as 64 signed values
(a UI, a game loop, a test harness).
"""
import logging

from AlphaBetaStrategy import AlphaBetaStrategy
from config import BOARD_SIZE, SearchConfig, get_preset
from ReversiState import Disc, ReversiState

logger = logging.getLogger(__name__)

# Returned when the player to move has no legal move and must pass.
NO_MOVE = -1


def play(
    player,
    board,
    max_depth,
    use_coin_parity,
    use_actual_mobility,
    use_potential_mobility,
    use_corner_score,
    use_stability_score,
) -> int:
    """
    Picks a move for `player` on `board`.

    Args:
        player: Positive for the first player, negative for the second.
        board: 64 row-major values; positive = first player, negative =
               second player, zero = empty.
        max_depth: Search depth in plies.
        use_*: Heuristic feature toggles.

    Returns:
        row * 8 + col of the chosen move, or NO_MOVE if `player` has none.
    """
    if len(board) != BOARD_SIZE * BOARD_SIZE:
        raise ValueError(f"number of squares must be 64, got {len(board)}")
    config = SearchConfig(
        max_depth=max_depth,
        use_coin_parity=use_coin_parity,
        use_actual_mobility=use_actual_mobility,
        use_potential_mobility=use_potential_mobility,
        use_corner_score=use_corner_score,
        use_stability_score=use_stability_score,
    )
    return play_config(player, board, config)


def play_preset(player, board, preset: str) -> int:
    """Same as `play`, with settings taken from a named difficulty ("easy", "normal", "hard")."""
    return play_config(player, board, get_preset(preset))


def play_config(player, board, config: SearchConfig) -> int:
    mover = Disc.from_value(player)
    if mover == Disc.NONE:
        raise ValueError("player cannot be none")
    state = ReversiState.from_flat(board, mover)

    move = AlphaBetaStrategy(config).best_move(state)
    if move is None:
        logger.debug("%s must pass", mover.name)
        return NO_MOVE
    move_row, move_col = move
    return move_row * BOARD_SIZE + move_col
