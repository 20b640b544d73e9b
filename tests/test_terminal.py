import io

import pytest
from blessed import Terminal
from blessed.keyboard import Keystroke

from termpong.errors import ScreenInitError
from termpong.hardware.base import Key
from termpong.hardware.terminal import TerminalScreen, translate_keystroke


@pytest.fixture()
def term():
    return Terminal(stream=io.StringIO(), force_styling=None)


def test_translate_keystroke(term):
    assert translate_keystroke(term, Keystroke('', term.KEY_UP, 'KEY_UP')) is Key.UP
    assert translate_keystroke(term, Keystroke('', term.KEY_DOWN, 'KEY_DOWN')) is Key.DOWN
    assert translate_keystroke(term, Keystroke('\x1b', term.KEY_ESCAPE, 'KEY_ESCAPE')) is Key.ESCAPE
    assert translate_keystroke(term, Keystroke('\x03')) is Key.INTERRUPT
    assert translate_keystroke(term, Keystroke('q')) is Key.OTHER


def test_init_refuses_non_tty(term):
    screen = TerminalScreen(term)
    with pytest.raises(ScreenInitError):
        screen.init()


def test_show_only_writes_changed_rows(term):
    screen = TerminalScreen(term)
    screen._allocate(10, 3)

    screen.set_cell(2, 1, '◆')
    screen.show()
    first = term.stream.getvalue()
    assert '◆' in first

    screen.show()
    assert term.stream.getvalue() == first

    screen.clear()
    screen.set_cell(3, 1, '◆')
    screen.show()
    assert len(term.stream.getvalue()) > len(first)


def test_set_cell_ignores_off_screen(term):
    screen = TerminalScreen(term)
    screen._allocate(10, 3)
    screen.set_cell(-1, 0, 'x')
    screen.set_cell(10, 0, 'x')
    screen.set_cell(0, 3, 'x')
    screen.show()
    assert 'x' not in term.stream.getvalue()
