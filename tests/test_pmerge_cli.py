import re

from ninetools.pmerge_cli import format_after, format_before, main

_TIME_LINE = re.compile(
    r"^Time to process a range of (\d+) elements with \[(list|deque)\] :\d+\.\d{5} us$"
)


def test_format_before_strips_plus():
    assert format_before(["3", "+1", "02"]) == "Before 3 1 02"


def test_format_before_empty():
    assert format_before([]) == "Before"


def test_format_after_trailing_spaces():
    assert format_after([1, 2, 3]) == "After: 1 2 3 "


def test_main_sorts_and_times(capsys):
    assert main(["3", "+1", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Before 3 1 2"
    assert lines[1] == "After: 1 2 3 "
    first = _TIME_LINE.match(lines[2])
    second = _TIME_LINE.match(lines[3])
    assert first and first.group(1) == "3" and first.group(2) == "list"
    assert second and second.group(1) == "3" and second.group(2) == "deque"
    assert len(lines) == 4


def test_main_single_argument_is_echoed(capsys):
    assert main(["+7"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Before 7"
    assert lines[1] == "After: +7"


def test_main_two_arguments(capsys):
    assert main(["3", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "After: 5 3 "


def test_main_without_arguments(capsys):
    assert main([]) == 2
    captured = capsys.readouterr()
    assert captured.err == "Number argument invalid\n"
    assert captured.out == ""


def test_main_rejects_bad_argument(capsys):
    assert main(["1", "-4"]) == 2
    assert capsys.readouterr().err == "Format invalid\n"