from ..game_logic import GameLogic, GameStatus, status_text
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QMessageBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

WINDOW_TITLE = "Tic-Tac-Toe"
TURN_STYLE = "color: #8acaff; font-weight: bold;"
WIN_STYLE = "color: lime; font-weight: bold;"
DRAW_STYLE = "color: #eee; font-weight: bold;"


class TicTacToeWindow(QMainWindow):
    """
    main window: board, status line, restart, end-of-game dialog
    """
    def __init__(self):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.game_logic = GameLogic()
        self.board_widget = BoardWidget(self.game_logic, parent=self)
        self._setup_ui()
        self._refresh_status()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("QMainWindow { background-color: #222; }")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + restart
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + restart button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.restart_button = QPushButton("Restart")
        self.restart_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label)
        hl.addStretch(1)
        hl.addWidget(self.restart_button)

    def _refresh_status(self):
        # status line from engine state
        logic = self.game_logic
        style = {
            GameStatus.WON: WIN_STYLE,
            GameStatus.DRAW: DRAW_STYLE,
        }.get(logic.status, TURN_STYLE)
        self.message_label.setStyleSheet(style)
        self.message_label.setText(
            status_text(logic.status, logic.current_player, logic.winner))

    @Slot(int)
    def _on_cell_clicked(self, index):
        result = self.game_logic.apply_move(index)
        if not result.accepted:
            return  # taken cell or finished game
        self.board_widget.update()
        self._refresh_status()
        if result.is_over:
            self.board_widget.set_accept_clicks(False)
            self._show_game_over(
                status_text(result.status, result.current_player, result.winner))

    def _show_game_over(self, message):
        # modal with the outcome, play again resets
        box = QMessageBox(self)
        box.setWindowTitle("Game Over")
        box.setText(message)
        again = box.addButton("Play Again", QMessageBox.AcceptRole)
        box.addButton("Close", QMessageBox.RejectRole)
        box.exec()
        if box.clickedButton() == again:
            self.reset_game()

    @Slot()
    def reset_game(self):
        # fresh session
        self.game_logic.reset()
        self.board_widget.set_accept_clicks(True)
        self.board_widget.update()
        self._refresh_status()
