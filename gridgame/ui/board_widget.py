from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..win_check import Mark

BACKGROUND_COLOR = QColor("#ffffff")
GRID_COLOR = QColor("#d1d5db")
HIGHLIGHT_COLOR = QColor("#bbf7d0")    # winning cells
X_COLOR = QColor("#2563eb")
O_COLOR = QColor("#dc2626")


class BoardWidget(QWidget):
    """
    custom widget to draw and click on an N x N board
    """
    cell_clicked = Signal(int)  # emits row-major cell index on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))

    def set_game_logic(self, game_logic):
        # swap in a new game (variant change)
        self.game_logic = game_logic
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def sizeHint(self):
        return QSize(70 * self.game_logic.board_size, 70 * self.game_logic.board_size)

    def _geometry(self):
        # square board centered in the widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        size = self.game_logic.board_size
        cell = side / size
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, size - 1)); col = max(0, min(col, size - 1))
        return row * size + col

    def paintEvent(self, event):
        """
        draw highlight, grid and X/O marks
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            size = self.game_logic.board_size
            cell_size = side / size
            # winning line
            for idx in self.game_logic.winning_line:
                r, c = divmod(idx, size)
                painter.fillRect(
                    QRectF(offset_x + c * cell_size, offset_y + r * cell_size,
                           cell_size, cell_size),
                    HIGHLIGHT_COLOR,
                )
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(size + 1):
                x = offset_x + i * cell_size
                painter.drawLine(QPointF(x, offset_y), QPointF(x, offset_y + side))
                y = offset_y + i * cell_size
                painter.drawLine(QPointF(offset_x, y), QPointF(offset_x + side, y))
            # marks
            for idx, mark in enumerate(self.game_logic.board):
                if mark is Mark.EMPTY:
                    continue
                r, c = divmod(idx, size)
                cx = offset_x + c * cell_size + cell_size / 2
                cy = offset_y + r * cell_size + cell_size / 2
                rad = cell_size / 2 * 0.6
                if mark is Mark.X:
                    painter.setPen(QPen(X_COLOR, 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.setPen(QPen(O_COLOR, 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        pos = event.position()
        idx = self.cell_at(pos.x(), pos.y())
        if idx is not None:
            self.cell_clicked.emit(idx)  # notify main window
