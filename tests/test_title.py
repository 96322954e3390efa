import io
import re
import socket

from quickfetch.output import Printer
from quickfetch.title import (
    TitleResult,
    detect_title,
    format_separator,
    format_title,
    print_separator,
    print_title,
)

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return ANSI.sub("", text)


def test_separator_matches_title_length():
    result = TitleResult("alice", "box")
    assert format_separator(result) == "-" * len("alice@box")


def test_separator_only_dashes():
    sep = format_separator(TitleResult("someone", "machine.local"))
    assert set(sep) == {"-"}
    assert len(sep) == len(plain(format_title(TitleResult("someone", "machine.local"))))


def test_format_title_plain_text():
    assert plain(format_title(TitleResult("alice", "box"), "")) == "alice@box"


def test_format_title_uses_color():
    title = format_title(TitleResult("alice", "box"), "34")
    assert title.count("\033[34m") == 2
    assert title.count("\033[1m") == 2


def test_detect_title_hostname():
    result = detect_title()
    assert result.hostname == socket.gethostname()
    assert detect_title() is result


def test_print_title():
    stream = io.StringIO()
    print_title(Printer(stream=stream))
    result = detect_title()
    assert plain(stream.getvalue()) == f"{result.user_name}@{result.hostname}\n"


def test_print_separator():
    stream = io.StringIO()
    print_separator(Printer(stream=stream))
    assert stream.getvalue() == format_separator(detect_title()) + "\n"