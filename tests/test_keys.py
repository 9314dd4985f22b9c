"""
Tests for key translation and the background key listener.
"""

import queue

import pytest
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from lanes.board.keys import expand, is_printable, translate
from lanes.board.input_source import KeyListener


@pytest.mark.parametrize("key, expected", [
    (Keys.Up, "up"),
    (Keys.Down, "down"),
    (Keys.Left, "left"),
    (Keys.Right, "right"),
    (Keys.Backspace, "backspace"),
    (Keys.Escape, "escape"),
    (Keys.Enter, "enter"),
    (Keys.ControlJ, "enter"),
    (Keys.Delete, "delete"),
    (Keys.ControlC, "interrupt"),
    (Keys.F5, None),
    (Keys.Tab, None),
])
def test_translate_named_keys(key, expected):
    assert translate(KeyPress(key)) == expected


@pytest.mark.parametrize("data, expected", [
    ("a", "a"),
    ("Q", "Q"),
    (" ", " "),
    ("é", "é"),
    ("\x00", None),
])
def test_translate_characters(data, expected):
    assert translate(KeyPress(data, data)) == expected


def test_is_printable():
    assert is_printable("x")
    assert is_printable(" ")
    assert not is_printable("up")
    assert not is_printable("")
    assert not is_printable("\t")


@pytest.fixture
def pipe_input():
    with create_pipe_input() as inp:
        yield inp


def drain(events):
    keys = []
    while not events.empty():
        keys.append(events.get_nowait())
    return keys


def test_poll_translates_terminal_bytes(pipe_input):
    events = queue.Queue()
    listener = KeyListener(events, input_=pipe_input)

    pipe_input.send_text("hi\x1b[B\x1b[C\r\x7f\x1b[3~")
    listener.poll(pipe_input)

    assert drain(events) == ["h", "i", "down", "right", "enter", "backspace", "delete"]


def test_poll_flushes_lone_escape(pipe_input):
    events = queue.Queue()
    listener = KeyListener(events, input_=pipe_input)

    pipe_input.send_text("\x1b")
    listener.poll(pipe_input)
    listener.poll(pipe_input)

    assert drain(events) == ["escape"]


def test_poll_with_nothing_pending(pipe_input):
    events = queue.Queue()
    listener = KeyListener(events, input_=pipe_input)

    assert listener.poll(pipe_input) == 0
    assert events.empty()


def test_listener_thread_emits_keys_and_ticks(pipe_input):
    events = queue.Queue()
    listener = KeyListener(events, tick_rate=0.01, input_=pipe_input)

    listener.start()
    try:
        pipe_input.send_text("q")
        seen = []
        while "q" not in seen or "tick" not in seen:
            seen.append(events.get(timeout=2))
    finally:
        listener.stop()
        listener.join(timeout=2)

    assert not listener.is_alive()
    assert listener.stopped


def test_expand_bracketed_paste_into_characters():
    paste = KeyPress(Keys.BracketedPaste, "Buy\tmilk\nnow")

    assert expand(paste) == list("Buymilknow")


def test_expand_single_keys():
    assert expand(KeyPress(Keys.Up)) == ["up"]
    assert expand(KeyPress("x", "x")) == ["x"]
    assert expand(KeyPress(Keys.F5)) == []


def test_poll_expands_pasted_text(pipe_input):
    events = queue.Queue()
    listener = KeyListener(events, input_=pipe_input)

    pipe_input.send_text("\x1b[200~a b\x1b[201~\r")
    listener.poll(pipe_input)

    assert drain(events) == ["a", " ", "b", "enter"]
