import logging

from ..game_logic import GameLogic, MoveResult, Outcome
from ..ui.board_widget import BoardWidget, X_COLOR, O_COLOR
from ..variants import CLASSIC, VARIANTS
from ..win_check import Mark

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QPushButton, QLabel, QMenuBar, QMenu,
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class GameWindow(QMainWindow):
    """
    main window: status line, board, reset button
    """
    def __init__(self, variant=CLASSIC):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_logic = GameLogic(variant)
        self.board_widget = BoardWidget(self.game_logic, parent=self)
        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setStyleSheet("QMainWindow { background-color: #f3f4f6; }")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu

        self.title_label = QLabel("")
        f = QFont(); f.setPointSize(20); f.setBold(True); self.title_label.setFont(f)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.title_label)

        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(14); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.message_label)

        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self.reset_button = QPushButton("Reset Game")
        self.reset_button.clicked.connect(self.reset_game)
        self.main_layout.addWidget(self.reset_button)

    def _create_menu_bar(self):
        '''game menu: one "new game" action per variant'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        self.variant_actions = {}
        for variant in VARIANTS.values():
            act = QAction(f"New {variant.title} ({variant.board_size}x{variant.board_size})", self)
            act.triggered.connect(lambda checked=False, v=variant: self.start_variant(v))
            game_menu.addAction(act)
            self.variant_actions[variant.name] = act
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _refresh(self):
        # redraw board + title + status line from game state
        variant = self.game_logic.variant
        self.setWindowTitle(variant.title)
        self.title_label.setText(variant.title)
        status = self.game_logic.status()
        style = "color: #374151;"
        if status.outcome is Outcome.WIN:
            color = X_COLOR if status.winner is Mark.X else O_COLOR
            style = f"color: {color.name()}; font-weight: bold;"
        elif status.outcome is Outcome.DRAW:
            style = "color: #374151; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(status.text)
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, index):
        res = self.game_logic.make_move(index)
        if res is MoveResult.REJECTED:
            return  # occupied cell or finished game: ignore
        self._refresh()

    def start_variant(self, variant):
        """
        begin a fresh game on another board
        """
        logger.info("starting %s (%dx%d)", variant.name, variant.board_size, variant.board_size)
        self.game_logic = GameLogic(variant)
        self.board_widget.set_game_logic(self.game_logic)
        self.board_widget.updateGeometry()
        self._refresh()

    @Slot()
    def reset_game(self):
        # back to fresh state, same variant
        self.game_logic.reset_game()
        self._refresh()
