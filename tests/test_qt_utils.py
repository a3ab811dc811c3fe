import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fleeting_notes.qt_utils import py_to_qt, qt_to_py


def test_offsets_match_for_bmp_text():
    text = "héllo wörld"
    for i in range(len(text) + 1):
        assert qt_to_py(text, i) == i
        assert py_to_qt(text, i) == i


def test_astral_characters_take_two_qt_units():
    text = "😀 hello world"
    assert qt_to_py(text, 3) == 2
    assert qt_to_py(text, 8) == 7
    assert text[qt_to_py(text, 3):qt_to_py(text, 8)] == "hello"
    assert py_to_qt(text, 2) == 3
    assert py_to_qt(text, len(text)) == len(text) + 1


def test_offsets_clamp_to_text():
    text = "a😀b"
    assert qt_to_py(text, 99) == len(text)
    assert qt_to_py(text, 0) == 0
    assert py_to_qt(text, -1) == 0
    assert py_to_qt(text, 99) == 4
