import argparse
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QPalette, QColor

from gridgame.config import LOG_LEVELS, Settings
from gridgame.logging_utils import configure_logging
from gridgame.ui.main_window import GameWindow
from gridgame.variants import VARIANTS, get_variant

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(243, 244, 246)
WINDOW_TEXT_COLOR = QColor(31, 41, 55)
BUTTON_COLOR = QColor(37, 99, 235)
BUTTON_TEXT_COLOR = QColor(255, 255, 255)
HIGHLIGHT_COLOR = QColor(29, 78, 216)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the light theme palette using predefined constants.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

def parse_args(argv=None, defaults=None):
    defaults = defaults or Settings.from_env()
    p = argparse.ArgumentParser(description="Two-player grid game")
    p.add_argument("--variant", choices=list(VARIANTS), default=defaults.variant,
                   help="board to start with (default: %(default)s)")
    p.add_argument("--log-level", choices=LOG_LEVELS, default=defaults.log_level,
                   type=str.upper, help="logging level (default: %(default)s)")
    args, qt_args = p.parse_known_args(argv)
    return Settings(variant=args.variant, log_level=args.log_level), qt_args

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def run():
    settings, qt_args = parse_args(sys.argv[1:])
    configure_logging(settings.log_level)

    app = QApplication([sys.argv[0]] + qt_args)
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = GameWindow(get_variant(settings.variant))
    window.show()
    sys.exit(app.exec())


if __name__ == '__main__':
    run()
