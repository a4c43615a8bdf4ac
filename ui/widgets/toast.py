# ui/widgets/toast.py

from PySide6.QtWidgets import QWidget, QLabel, QVBoxLayout, QGraphicsOpacityEffect
from PySide6.QtCore import Qt, QTimer, QPropertyAnimation, QEasingCurve


class Toast(QWidget):
    """Transient, non-blocking notice that fades in and out."""

    def __init__(self, message, duration=2000, parent=None, warning=False):
        super().__init__(parent)
        self.setWindowFlags(Qt.FramelessWindowHint | Qt.ToolTip)
        self.setAttribute(Qt.WA_TransparentForMouseEvents)
        self.setAttribute(Qt.WA_StyledBackground, True)

        background = "#ffd8c4" if warning else "#fff8c4"
        self.setStyleSheet(f"""
            background: {background};
            color: #333;
            padding: 10px;
            border: 1px solid #ccc;
            font-size: 13px;
        """)

        label = QLabel(message, self)
        layout = QVBoxLayout(self)
        layout.addWidget(label)
        layout.setContentsMargins(10, 6, 10, 6)

        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self.opacity_effect)

        self.fade_in = self._make_fade(0, 1)
        self.fade_out = self._make_fade(1, 0)
        self.fade_out.finished.connect(self.close)

        self.adjustSize()
        QTimer.singleShot(duration, self.start_fade_out)

    def _make_fade(self, start, end):
        anim = QPropertyAnimation(self.opacity_effect, b"opacity", self)
        anim.setDuration(300)
        anim.setStartValue(start)
        anim.setEndValue(end)
        anim.setEasingCurve(QEasingCurve.InOutQuad)
        return anim

    def show(self):
        super().show()
        self.fade_in.start()

    def start_fade_out(self):
        self.fade_out.start()
