import datetime

import pytest

from ninetools.btc_validation import (
    InputError,
    check_database_line,
    check_date,
    check_input_line,
    check_txt_name,
    check_value,
    split_field,
)


def test_split_field_takes_prefix_before_delimiter():
    assert split_field("2011-01-03", "-", 0) == "2011"


def test_split_field_without_delimiter_takes_rest():
    assert split_field("abc", "-", 1) == "bc"


def test_split_field_start_past_end_raises():
    with pytest.raises(InputError):
        split_field("abc", "-", 10)


def test_input_header_accepted():
    assert check_input_line("date | value", 0) == "date | value"


def test_input_header_wrong_raises():
    with pytest.raises(InputError, match="One line"):
        check_input_line("2011-01-03 | 3", 0)


def test_input_line_accepted():
    assert check_input_line("2011-01-03 | 1.25", 1) == "2011-01-03 | 1.25"


@pytest.mark.parametrize(
    "line", ["2011-01-03 | 1.234", "2011-01-03 => 3", "2011-01-03 |", "bad"]
)
def test_input_line_bad_format(line):
    with pytest.raises(InputError, match="Format invalid"):
        check_input_line(line, 3)


def test_check_date_valid_leap_day():
    assert check_date("2012-02-29") == datetime.date(2012, 2, 29)


def test_check_date_with_trailing_space():
    assert check_date("2011-01-03 ") == datetime.date(2011, 1, 3)


@pytest.mark.parametrize("date", ["2011-02-29", "2011-13-01", "2011-00-10", "2011-04-31"])
def test_check_date_rejects_impossible(date):
    with pytest.raises(InputError, match="Bad Input"):
        check_date(date)


def test_check_value_negative():
    with pytest.raises(InputError, match=r"Bad value \(neg\)"):
        check_value(" -1")


def test_check_value_too_large():
    with pytest.raises(InputError, match=r"Bad value \(top\)"):
        check_value(" 1000")


def test_check_value_bounds_accepted():
    assert check_value(" 100") == 100.0
    assert check_value(" 0") == 0.0
    assert check_value(" 42.5") == 42.5


def test_txt_name_accepted():
    assert check_txt_name("input.txt") == "input.txt"


@pytest.mark.parametrize("name", ["input.csv", "input.txt.bak", "txt"])
def test_txt_name_rejected(name):
    with pytest.raises(InputError):
        check_txt_name(name)


def test_database_header_only_on_first_line():
    assert check_database_line(1, "date,exchange_rate") == "date,exchange_rate"
    with pytest.raises(InputError, match="Format invalid Data"):
        check_database_line(2, "date,exchange_rate")


def test_database_line_accepted():
    assert check_database_line(2, "2009-01-02,0") == "2009-01-02,0"


@pytest.mark.parametrize("line", ["2009-01-02,-1", "2009-01-02;3", "2009-01-02,1.234"])
def test_database_line_rejected(line):
    with pytest.raises(InputError):
        check_database_line(3, line)