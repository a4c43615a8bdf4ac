# core/signals.py

from PySide6.QtCore import QObject, Signal


class AppSignals(QObject):
    intent = Signal(object)
    item_visibility_changed = Signal(str, bool)
    category_visibility_changed = Signal(object, bool)
    render_refreshed = Signal()
    preference_write_failed = Signal(str)
    catalog_unavailable = Signal(str)


# Singleton instance
signals = AppSignals()
