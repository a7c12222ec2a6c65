from enum import IntEnum

import numpy as np

from config import BOARD_SIZE, DIRECTIONS


class Disc(IntEnum):
    NONE = 0
    FIRST = 1
    SECOND = -1

    @classmethod
    def from_value(cls, value) -> "Disc":
        """Decodes any signed number by its sign: positive is FIRST, negative is SECOND."""
        if value > 0:
            return cls.FIRST
        if value < 0:
            return cls.SECOND
        return cls.NONE


def get_opponent(player: Disc) -> Disc:
    if player == Disc.FIRST:
        return Disc.SECOND
    if player == Disc.SECOND:
        return Disc.FIRST
    raise ValueError("player cannot be none")


def _build_lines():
    """
    Every maximal line a capture can happen on: rows, columns, the two long
    diagonals and the shorter diagonals down to length 3 in both orientations.
    """
    n = BOARD_SIZE
    lines = []
    for i in range(n):
        lines.append([(i, j) for j in range(n)])
        lines.append([(j, i) for j in range(n)])
    lines.append([(i, i) for i in range(n)])
    lines.append([(i, n - 1 - i) for i in range(n)])
    for i in range(1, n - 2):
        lines.append([(j, j - i) for j in range(i, n)])
        lines.append([(j - i, j) for j in range(i, n)])
        lines.append([(j, n - 1 - (j - i)) for j in range(i, n)])
        lines.append([(j - i, n - 1 - j) for j in range(i, n)])
    return lines


LINES = _build_lines()


class _ScanState(IntEnum):
    MATCH_NONE = 0
    MATCH_SELF = 1
    MATCH_OPPONENT = 2


def _scan_line(player, cells, scores, line):
    """
    Walks one line in one direction, crediting each empty cell that closes a
    run of opponent discs started by one of the player's own discs.
    """
    state = _ScanState.MATCH_NONE
    count = 0
    for r, c in line:
        disc = cells[r][c]
        if state == _ScanState.MATCH_NONE:
            if disc == player:
                state = _ScanState.MATCH_SELF
        elif state == _ScanState.MATCH_SELF:
            if disc == Disc.NONE:
                state = _ScanState.MATCH_NONE
            elif disc != player:
                state = _ScanState.MATCH_OPPONENT
                count = 1
        else:
            if disc == Disc.NONE:
                scores[r][c] += count
                state = _ScanState.MATCH_NONE
                count = 0
            elif disc == player:
                state = _ScanState.MATCH_SELF
                count = 0
            else:
                count += 1


def get_move_scores(player: Disc, board: np.ndarray) -> np.ndarray:
    """
    Returns an 8x8 grid holding, for every cell, how many opponent discs
    `player` would flip by playing there. A zero means the move is illegal.
    """
    if player == Disc.NONE:
        raise ValueError("player cannot be none")
    cells = board.tolist()
    scores = [[0] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for line in LINES:
        _scan_line(player, cells, scores, line)
        _scan_line(player, cells, scores, reversed(line))
    return np.array(scores, dtype=np.int32)


def get_legal_moves(player: Disc, board: np.ndarray) -> list:
    """
    Returns [((row, col), score), ...] for every legal move, best capture first.
    Equal scores keep row-major order.
    """
    scores = get_move_scores(player, board)
    legal_moves = [((int(r), int(c)), int(scores[r, c])) for r, c in np.argwhere(scores > 0)]
    legal_moves.sort(key=lambda item: item[1], reverse=True)
    return legal_moves


class ReversiState:
    """
    Encapsulates a Reversi position: the board and the player to move.

    States are never mutated once built; applying a move returns a new state
    that owns its own copy of the board.
    """
    BOARD_SIZE = BOARD_SIZE
    DIRECTIONS = DIRECTIONS

    def __init__(self, board=None, to_play=Disc.FIRST):
        """
        Args:
            board: An 8x8 array of signed values, a 64-char string, or None for
                   the standard starting position.
            to_play: The player whose turn it is (FIRST or SECOND).
        """
        if board is None:
            self.board = np.zeros((self.BOARD_SIZE, self.BOARD_SIZE), dtype=np.int8)
            self.board[3, 4] = Disc.FIRST
            self.board[4, 3] = Disc.FIRST
            self.board[3, 3] = Disc.SECOND
            self.board[4, 4] = Disc.SECOND
        elif isinstance(board, str):
            self.board = self._from_str(board)
        else:
            board = np.asarray(board)
            if board.shape != (self.BOARD_SIZE, self.BOARD_SIZE):
                raise ValueError(f"board must be {self.BOARD_SIZE}x{self.BOARD_SIZE}, got shape {board.shape}")
            self.board = np.sign(board).astype(np.int8)

        self.to_play = Disc.from_value(to_play)
        if self.to_play == Disc.NONE:
            raise ValueError("to_play cannot be none")
        self._cached_legal_moves = None

    @classmethod
    def from_flat(cls, cells, to_play):
        """Builds a state from a row-major sequence of 64 signed values."""
        if len(cells) != cls.BOARD_SIZE * cls.BOARD_SIZE:
            raise ValueError(f"number of squares must be 64, got {len(cells)}")
        board = np.array([np.sign(v) for v in cells], dtype=np.int8)
        return cls(board.reshape(cls.BOARD_SIZE, cls.BOARD_SIZE), to_play)

    ## ----------------- ##
    ## Core Game Methods ##
    ## ----------------- ##

    def get_move_scores(self) -> np.ndarray:
        return get_move_scores(self.to_play, self.board)

    def get_legal_moves(self) -> list:
        """Returns the legal moves for the current player as (row, col) tuples, best capture first."""
        if self._cached_legal_moves is None:
            self._cached_legal_moves = [move for move, _ in get_legal_moves(self.to_play, self.board)]
        return self._cached_legal_moves

    def apply_action(self, move):
        """
        Plays `move` for the current player and returns a *new* ReversiState
        for the opponent's turn. `move` must be legal.
        """
        r, c = move
        new_board = self.board.copy()
        new_board[r, c] = self.to_play

        for dr, dc in self.DIRECTIONS:
            if not self._has_flips_in_direction(new_board, r, c, dr, dc):
                continue
            r_scan, c_scan = r + dr, c + dc
            while new_board[r_scan, c_scan] != self.to_play:
                new_board[r_scan, c_scan] = self.to_play
                r_scan += dr
                c_scan += dc

        return ReversiState(new_board, get_opponent(self.to_play))

    def pass_turn(self):
        """Returns the same position with the opponent to play."""
        return ReversiState(self.board, get_opponent(self.to_play))

    def is_terminal(self) -> bool:
        """Checks if the game is over (neither player has a legal move)."""
        if self.get_legal_moves():
            return False
        return not self.pass_turn().get_legal_moves()

    def get_game_result(self):
        """Returns the game result (1, -1, 0) if terminal, otherwise None."""
        if not self.is_terminal():
            return None

        score = int(np.sum(self.board))
        if score > 0: return 1
        if score < 0: return -1
        return 0

    def count_discs(self, player: Disc) -> int:
        return int(np.count_nonzero(self.board == player))

    ## ----------------- ##
    ## Format Converters ##
    ## ----------------- ##

    def to_array(self) -> np.ndarray:
        """Returns the board as a NumPy array."""
        return self.board.copy()

    def to_flat(self) -> list:
        """Returns the board as 64 row-major values (1, -1 or 0)."""
        return [int(v) for v in self.board.flatten()]

    def to_str(self) -> str:
        """Returns the board as a 64-character string."""
        char_map = {1: 'o', -1: 'x', 0: '.'}
        return "".join([char_map[piece] for piece in self.board.flatten()])

    ## ----------------- ##
    ## Private Helpers   ##
    ## ----------------- ##

    def _is_valid(self, r, c):
        return 0 <= r < self.BOARD_SIZE and 0 <= c < self.BOARD_SIZE

    def _has_flips_in_direction(self, board, r, c, dr, dc) -> bool:
        r_scan, c_scan = r + dr, c + dc
        while self._is_valid(r_scan, c_scan):
            disc = board[r_scan, c_scan]
            if disc == Disc.NONE:
                return False
            if disc == self.to_play:
                return True
            r_scan += dr
            c_scan += dc
        return False

    def _from_str(self, board_str: str) -> np.ndarray:
        if len(board_str) != self.BOARD_SIZE * self.BOARD_SIZE:
            raise ValueError(f"number of squares must be 64, got {len(board_str)}")
        player_map = {'o': 1, 'x': -1, '.': 0}
        try:
            board_list = [player_map[c] for c in board_str]
        except KeyError as e:
            raise ValueError(f"unknown square character {e.args[0]!r}") from None
        return np.array(board_list, dtype=np.int8).reshape(self.BOARD_SIZE, self.BOARD_SIZE)
