from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import Player, BOARD_SIZE, cell_to_index
from ..geometry import cell_center, winning_line

BACKGROUND_COLOR = QColor("#333")
GRID_COLOR = QColor("#555")
X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#6ee7b7")
WIN_LINE_COLOR = QColor("#f5f5f5")
MIN_BOARD_SIDE = 150


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits board index on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # read-only view of the engine
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(MIN_BOARD_SIDE, MIN_BOARD_SIDE))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _board_rect(self):
        # centred square the grid lives in
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._board_rect()
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            cell_size = side / BOARD_SIZE
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i*cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy+side))
                y = oy + i*cell_size
                painter.drawLine(int(ox), int(y), int(ox+side), int(y))
            # marks
            rad = cell_size/2 * 0.7
            for index, mark in enumerate(self.game_logic.board):
                if mark is None:
                    continue
                cx, cy = cell_center(index, side, (ox, oy))
                if mark is Player.X:
                    painter.setPen(QPen(X_COLOR, 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(O_COLOR, 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # winning line across first and last cell of the combination
            combo = self.game_logic.winning_combination
            if combo is not None:
                line = winning_line(combo, side, (ox, oy))
                painter.setPen(QPen(WIN_LINE_COLOR, 8, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
                painter.drawLine(QPointF(*line.start), QPointF(*line.end))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.game_logic.is_over:
            return
        ox, oy, side = self._board_rect()
        x, y = event.position().x(), event.position().y()
        # only inside grid
        if not (ox <= x < ox+side and oy <= y < oy+side):
            return
        cell = side / BOARD_SIZE
        if cell <= 0: return
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        self.cell_clicked.emit(cell_to_index(row, col))  # notify main window
