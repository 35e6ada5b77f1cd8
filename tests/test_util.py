from datetime import datetime, timedelta

import pytest

from maxkcut import util
from maxkcut.util import ExceptionType, LogLevel, MKCError


@pytest.fixture(autouse=True)
def _restore_level():
    yield
    util.set_log_level(LogLevel.ERROR)


def test_is_zero_threshold():
    assert util.is_zero(0.0)
    assert util.is_zero(-util.ZERO / 2)
    assert not util.is_zero(util.ZERO)
    assert not util.is_zero(1.0)


def test_format_vector():
    assert util.format_vector([1, 2, 3]) == "Print vector, of size = 3 : {1, 2, 3};"


def test_format_vector_empty():
    assert util.format_vector([]) == "Print vector, of size = 0 : {};"


def test_format_matrix_rows():
    out = util.format_matrix([1, 2, 3, 4, 5, 6], 3)
    assert out.startswith("Print vector, of size = 6 :\n")
    assert out.count("| \n") == 2
    assert out.endswith("| ;\n")


@pytest.mark.parametrize(
    "text, delim, expected",
    [
        ("a b c", " ", ["a", "b", "c"]),
        ("  a   b  ", " ", ["a", "b"]),
        ("", " ", []),
        ("aaa", "aa", ["a"]),
        ("x = 3", " ", ["x", "=", "3"]),
    ],
)
def test_split_string(text, delim, expected):
    assert util.split_string(text, delim) == expected


def test_split_string_empty_delimiter():
    with pytest.raises(ValueError):
        util.split_string("abc", "")


def test_log_respects_level(capsys):
    util.set_log_level(LogLevel.WARNING)
    assert util.warn("hello") is True
    assert util.info("hidden") is False
    out = capsys.readouterr().out
    assert "<Warning>:hello" in out
    assert "hidden" not in out


def test_debug_shown_at_debug_level(capsys):
    util.set_log_level(LogLevel.DEBUG)
    assert util.debug("details")
    assert "<Debug>:details" in capsys.readouterr().out


def test_fatal_always_shown(capsys):
    util.set_log_level(LogLevel.FATAL)
    assert util.fatal("boom")
    assert "<Fatal>:boom" in capsys.readouterr().out


def test_error_raises_stop():
    with pytest.raises(MKCError) as info:
        util.error("bad")
    assert info.value.kind is ExceptionType.STOP_EXECUTION
    assert info.value.message == "bad"


def test_current_date_time_format():
    value = util.current_date_time()
    parsed = datetime.strptime(value, "%Y-%m-%d.%H:%M:%S")
    assert abs(parsed - datetime.now()) < timedelta(minutes=1)
    assert len(value) == 19


def test_dir_exists_and_make_dir(tmp_path):
    target = tmp_path / "out"
    assert not util.dir_exists(target)
    util.make_dir(target)
    assert util.dir_exists(target)
    util.make_dir(target)
    assert util.dir_exists(target)


def test_dir_exists_false_for_file(tmp_path):
    f = tmp_path / "f.txt"
    f.write_text("x")
    assert util.dir_exists(f) is False