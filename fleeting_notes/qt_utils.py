from __future__ import annotations

from contextlib import contextmanager

from PySide6.QtGui import QGuiApplication


@contextmanager
def blocked_signals(obj):
    """
    Temporarily silence Qt signals on obj, always re-enabling them.
    """
    if obj is None:
        yield
        return
    try:
        obj.blockSignals(True)
        yield
    finally:
        try:
            obj.blockSignals(False)
        except RuntimeError:
            # Underlying C++ object may already be gone.
            pass


def screen_has_color() -> bool:
    """Monochrome / grayscale panels report a depth of 8 bits or less."""
    screen = QGuiApplication.primaryScreen()
    if screen is None:
        return False
    return screen.depth() > 8


# Qt text positions count UTF-16 code units; Python str indexes code points.

def qt_to_py(text: str, pos: int) -> int:
    """Code-point index for a Qt cursor position in text."""
    units = 0
    for i, ch in enumerate(text):
        if units >= pos:
            return i
        units += 2 if ord(ch) > 0xFFFF else 1
    return len(text)


def py_to_qt(text: str, idx: int) -> int:
    """Qt cursor position for a code-point index in text."""
    return len(text[:max(idx, 0)].encode("utf-16-le")) // 2
