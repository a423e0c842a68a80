import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

log = logging.getLogger(__name__)

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# checked in this order, first match wins
WINNING_COMBINATIONS = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),   # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),   # cols
    (0, 4, 8), (2, 4, 6),              # diags
)


class Player(str, Enum):
    X = "X"
    O = "O"

    def opposite(self):
        return Player.O if self is Player.X else Player.X


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class InvalidMoveIndex(ValueError):
    """
    index outside the board, a caller bug rather than a user action
    """


@dataclass(frozen=True)
class MoveResult:
    """
    outcome of one apply_move call
    """
    accepted: bool
    index: int
    status: GameStatus
    current_player: Player
    winner: Optional[Player] = None
    winning_combination: Optional[tuple] = None

    @property
    def is_over(self):
        return self.status is not GameStatus.IN_PROGRESS


def _check_index(index):
    # bool is an int subclass, not a cell
    if isinstance(index, bool) or not isinstance(index, int) \
       or not 0 <= index < CELL_COUNT:
        raise InvalidMoveIndex(f"cell index must be 0-{CELL_COUNT - 1}, got {index!r}")
    return index


def index_to_cell(index):
    """
    board index -> (row, col)
    """
    return divmod(_check_index(index), BOARD_SIZE)


def cell_to_index(row, col):
    """
    (row, col) -> board index
    """
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise InvalidMoveIndex(f"cell ({row}, {col}) is off the board")
    return row * BOARD_SIZE + col


def find_winning_combination(board):
    """
    first combination whose three cells hold the same mark, or None
    """
    for combo in WINNING_COMBINATIONS:
        a, b, c = combo
        if board[a] is not None and board[a] == board[b] == board[c]:
            return combo
    return None


def status_text(status, current_player, winner=None):
    """
    one-line status for the label under the board
    """
    if status is GameStatus.WON:
        return f"Player {winner.value} Wins!"
    if status is GameStatus.DRAW:
        return "It's a Draw!"
    return f"Player {current_player.value}'s turn"


class GameLogic:
    """
    tic-tac-toe rules and state for a single hot-seat session
    """
    def __init__(self):
        self.board_size = BOARD_SIZE
        self.reset()

    def reset(self):
        """
        drop the session and start over: empty board, X to move
        """
        self._board = [None] * CELL_COUNT  # None = empty
        self._current_player = Player.X
        self._status = GameStatus.IN_PROGRESS
        self._winner = None
        self._winning_combination = None
        self._move_count = 0
        log.info("new game, player %s to move", self._current_player.value)

    # --- queries ---

    @property
    def board(self):
        return tuple(self._board)

    @property
    def current_player(self):
        return self._current_player

    @property
    def status(self):
        return self._status

    @property
    def winner(self):
        return self._winner

    @property
    def winning_combination(self):
        return self._winning_combination

    @property
    def move_count(self):
        return self._move_count

    @property
    def is_over(self):
        return self._status is not GameStatus.IN_PROGRESS

    def is_cell_empty(self, index):
        return self._board[_check_index(index)] is None

    def empty_cells(self):
        return [i for i, mark in enumerate(self._board) if mark is None]

    def snapshot(self):
        """
        plain-data copy of the session for whoever renders it
        """
        return {
            "board": [mark.value if mark else None for mark in self._board],
            "current_player": self._current_player.value,
            "status": self._status.value,
            "winner": self._winner.value if self._winner else None,
            "winning_combination": (list(self._winning_combination)
                                    if self._winning_combination else None),
        }

    # --- moves ---

    def _result(self, index, accepted):
        return MoveResult(
            accepted=accepted,
            index=index,
            status=self._status,
            current_player=self._current_player,
            winner=self._winner,
            winning_combination=self._winning_combination,
        )

    def apply_move(self, index):
        """
        place the current player's mark at index and advance the game.
        occupied cell or finished game -> no-op with accepted=False.
        raises InvalidMoveIndex for indices off the board.
        """
        _check_index(index)
        if self.is_over or self._board[index] is not None:
            log.debug("move %d rejected (status=%s, cell=%s)",
                      index, self._status.value, self._board[index])
            return self._result(index, accepted=False)

        player = self._current_player
        self._board[index] = player
        self._move_count += 1
        log.debug("player %s took cell %d", player.value, index)

        combo = find_winning_combination(self._board)
        if combo is not None:
            self._status = GameStatus.WON
            self._winner = player
            self._winning_combination = combo
            log.info("player %s wins on %s", player.value, combo)
        elif None not in self._board:
            self._status = GameStatus.DRAW
            log.info("draw after %d moves", self._move_count)
        else:
            self._current_player = player.opposite()
        return self._result(index, accepted=True)
