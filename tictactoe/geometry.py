import math
from typing import NamedTuple, Tuple

from .game_logic import BOARD_SIZE, WINNING_COMBINATIONS


class WinLine(NamedTuple):
    """
    overlay line across a winning combination, in widget coords
    """
    start: Tuple[float, float]
    end: Tuple[float, float]
    length: float
    angle: float  # degrees, 0 = pointing right, y grows downward


def cell_center(index, side, origin=(0.0, 0.0)):
    """
    centre of a cell on a square board of the given side length
    """
    row, col = divmod(index, BOARD_SIZE)
    cell = side / BOARD_SIZE
    ox, oy = origin
    return (ox + col * cell + cell / 2, oy + row * cell + cell / 2)


def winning_line(combination, side, origin=(0.0, 0.0)):
    """
    line from the first to the last cell centre of a winning combination
    """
    combination = tuple(combination)
    if combination not in WINNING_COMBINATIONS:
        raise ValueError(f"not a winning combination: {combination!r}")
    start = cell_center(combination[0], side, origin)
    end = cell_center(combination[-1], side, origin)
    dx, dy = end[0] - start[0], end[1] - start[1]
    return WinLine(
        start=start,
        end=end,
        length=math.hypot(dx, dy),
        angle=math.degrees(math.atan2(dy, dx)),
    )
