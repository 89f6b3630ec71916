"""Tests for the command-line front-end."""

import io
import logging
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from numeronym.cli import main, format_line


def test_words_from_arguments():
    out = io.StringIO()
    assert main(["localization", "Andreessen Horowitz"], stdout=out) == 0
    assert out.getvalue() == "l10n\na16z\n"
    print("✓ test_words_from_arguments")


def test_lines_from_stdin():
    out = io.StringIO()
    stdin = io.StringIO("accessibility\n   shorten \r\n\nTOMATO")
    assert main([], stdin=stdin, stdout=out) == 0
    assert out.getvalue() == "a11y\ns5n\n\nt4o\n"
    print("✓ test_lines_from_stdin")


def test_details_output():
    assert format_line("abc", details=True) == "abc\ta1c\t3\t1"
    assert format_line(" ab ", details=True) == " ab \tab\t2\t0"

    out = io.StringIO()
    main(["--details", "localization"], stdout=out)
    assert out.getvalue() == "localization\tl10n\t12\t10\n"
    print("✓ test_details_output")


def test_details_escape_tabs():
    line = format_line("sho rt\ten", details=True)
    assert line == "sho rt\\ten\ts5n\t7\t5"
    assert len(line.split("\t")) == 4
    print("✓ test_details_escape_tabs")


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, list(root.handlers)
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_log_level_from_environment(monkeypatch, root_logger):
    monkeypatch.setenv("NUMERONYM_LOG_LEVEL", "debug")
    assert main(["abc"], stdout=io.StringIO()) == 0
    assert root_logger.level == logging.DEBUG
    print("✓ test_log_level_from_environment")


def test_invalid_log_level_falls_back_to_warning(monkeypatch, root_logger):
    monkeypatch.setenv("NUMERONYM_LOG_LEVEL", "not-a-level")
    out = io.StringIO()
    assert main(["abc"], stdout=out) == 0
    assert out.getvalue() == "a1c\n"
    assert root_logger.level == logging.WARNING
    print("✓ test_invalid_log_level_falls_back_to_warning")


def test_verbose_overrides_environment(monkeypatch, root_logger):
    monkeypatch.setenv("NUMERONYM_LOG_LEVEL", "ERROR")
    assert main(["-v", "abc"], stdout=io.StringIO()) == 0
    assert root_logger.level == logging.DEBUG

    monkeypatch.delenv("NUMERONYM_LOG_LEVEL")
    assert main(["abc"], stdout=io.StringIO()) == 0
    assert root_logger.level == logging.WARNING
    print("✓ test_verbose_overrides_environment")


if __name__ == "__main__":
    test_words_from_arguments()
    test_lines_from_stdin()
    test_details_output()
    test_details_escape_tabs()
    print("\n🎉 All tests passed!")
