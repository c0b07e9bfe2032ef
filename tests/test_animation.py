import io
from unittest import mock

import pytest

from labkit.animation import (
    CLEAR_SEQUENCE,
    clear_characters,
    clear_screen,
    delay,
    loading_dots,
    typewriter,
)


def test_clear_screen_writes_escape_sequence():
    out = io.StringIO()
    clear_screen(out)
    assert out.getvalue() == "\x1B[2J\x1B[H"
    assert out.getvalue() == CLEAR_SEQUENCE


@pytest.mark.parametrize("count", [0, 1, 3, 7])
def test_clear_characters_backs_up_blanks_and_backs_up(count):
    out = io.StringIO()
    clear_characters(count, out)
    assert out.getvalue() == "\b" * count + " " * count + "\b" * count


def test_loading_dots_without_pause():
    out = io.StringIO()
    loading_dots(2, out, 0)
    erase = "\b\b\b   \b\b\b"
    assert out.getvalue() == ("..." + erase) * 2 + "..."


def test_loading_dots_zero_rounds_leaves_three_dots():
    out = io.StringIO()
    loading_dots(0, out, 0)
    assert out.getvalue() == "..."


def test_typewriter_writes_whole_text():
    out = io.StringIO()
    typewriter("Hello, Roomba", 0, out)
    assert out.getvalue() == "Hello, Roomba"


@mock.patch("labkit.animation.time.sleep")
def test_typewriter_pauses_once_per_character(sleep):
    out = io.StringIO()
    typewriter("abcd", 0.05, out)
    assert out.getvalue() == "abcd"
    assert sleep.call_args_list == [mock.call(0.05)] * 4


@mock.patch("labkit.animation.time.sleep")
def test_delay_sleeps_for_given_time(sleep):
    result = delay(0.25)
    assert result is None
    assert sleep.call_args_list == [mock.call(0.25)]


@mock.patch("labkit.animation.time.sleep")
def test_delay_skips_non_positive(sleep):
    first = delay(0)
    second = delay(-1)
    assert (first, second) == (None, None)
    assert sleep.call_args_list == []


@mock.patch("labkit.animation.time.sleep")
def test_loading_dots_pauses_four_times_per_round(sleep):
    out = io.StringIO()
    loading_dots(2, out, 0.5)
    erase = "\b\b\b   \b\b\b"
    assert out.getvalue() == ("..." + erase) * 2 + "..."
    assert len(sleep.call_args_list) == 8