"""Tests for frame drawing with blessed."""

import os
import blessed
from curtsies.events import PasteEvent
from unittest.mock import patch, PropertyMock, MagicMock
from tedit.keyboard import KeyboardHandler
from tedit.render import Frame
from tedit.terminal import TerminalInterface


def create_terminal():
    return TerminalInterface(blessed.Terminal(kind='xterm-256color', force_styling=True))


def test_format_status_pads_to_width():
    t = create_terminal()
    with patch.object(type(t.term), 'width', new_callable=PropertyMock, return_value=20):
        status = t.format_status(" notes.txt")
    assert t.term.strip_seqs(status) == " notes.txt".ljust(20)


def test_format_status_truncates_to_width():
    t = create_terminal()
    with patch.object(type(t.term), 'width', new_callable=PropertyMock, return_value=5):
        status = t.format_status(" a/very/long/path.txt")
    assert t.term.strip_seqs(status) == " a/ve"


def test_draw_frame_writes_lines_and_status(capsys):
    t = create_terminal()
    with patch.object(type(t.term), 'width', new_callable=PropertyMock, return_value=20), \
         patch.object(type(t.term), 'height', new_callable=PropertyMock, return_value=3):
        t.draw_frame(Frame(["hello", "~"], 2, 0), " [New File]")
    out = t.term.strip_seqs(capsys.readouterr().out)
    assert "hello" in out
    assert "~" in out
    assert "[New File]" in out


def test_draw_frame_without_status(capsys):
    t = create_terminal()
    with patch.object(type(t.term), 'width', new_callable=PropertyMock, return_value=20), \
         patch.object(type(t.term), 'height', new_callable=PropertyMock, return_value=3):
        t.draw_frame(Frame(["hello", "world", "~"], 0, 1))
    out = t.term.strip_seqs(capsys.readouterr().out)
    assert "world" in out
    assert "[New File]" not in out


def test_get_key_without_input_returns_none():
    t = create_terminal()
    assert t.get_key(timeout=0) is None


def test_get_key_returns_every_key_from_one_read(pty_input):
    inp, master_fd = pty_input
    t = create_terminal()
    t._curtsies_input = inp
    os.write(master_fd, b"abc")

    keys = [t.get_key(timeout=1.0)]
    # The rest were read together with 'a' and must not wait for more input
    keys.append(t.get_key(timeout=0))
    keys.append(t.get_key(timeout=0))
    assert keys == ['a', 'b', 'c']
    assert t.get_key(timeout=0) is None


def test_pasted_text_arrives_as_keys(pty_input):
    inp, master_fd = pty_input
    t = create_terminal()
    t._curtsies_input = inp
    kb = KeyboardHandler(t)
    os.write(master_fd, b"hello pasted world")

    chars = []
    event = kb.get_key_event(timeout=1.0)
    while event:
        chars.append(event.value)
        event = kb.get_key_event(timeout=0)
    assert ''.join(chars) == "hello pasted world"


def test_paste_event_is_split_into_keys():
    t = create_terminal()
    paste = PasteEvent()
    paste.events.extend(['x', 'y', '<SPACE>'])
    t._curtsies_input = MagicMock()
    t._curtsies_input.send.side_effect = [paste, None]

    assert [t.get_key(timeout=0) for _ in range(4)] == ['x', 'y', '<SPACE>', None]
    t._curtsies_input.send.assert_called_with(0)
