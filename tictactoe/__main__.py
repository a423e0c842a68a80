import argparse
import logging
import os
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe.ui.main_window import TicTacToeWindow

log = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white
DISABLED_TEXT_COLOR = QColor(127, 127, 127)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVEL_ENV = 'TICTACTOE_LOG_LEVEL'

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the dark theme palette the board colours are tuned for.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Two-player tic-tac-toe')
    parser.add_argument('--log-level',
                        default=os.environ.get(LOG_LEVEL_ENV, 'WARNING'),
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        type=str.upper,
                        help=f'logging verbosity (env: {LOG_LEVEL_ENV})')
    # Qt keeps its own flags, leave them for QApplication
    return parser.parse_known_args(argv)


def main(argv=None):
    args, qt_args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    app = QApplication([sys.argv[0]] + qt_args)
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = TicTacToeWindow()
    window.show()
    log.info("window shown")
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
