"""Tests for input normalization."""

import pytest
from highlight.filters import normalize_input, process_inputs


def test_normalize_input_plain():
    """Test a plain single-line input is unchanged."""
    assert normalize_input("feature/foo") == "feature/foo"


def test_normalize_input_trailing_newline():
    """Test captured command output loses its newline."""
    assert normalize_input("main\n") == "main"


def test_normalize_input_keeps_first_line():
    """Test only the first line of multi-line input is kept."""
    assert normalize_input("main\ndevelop\n") == "main"


def test_normalize_input_strips_whitespace():
    """Test surrounding whitespace is removed by default."""
    assert normalize_input("  main \t") == "main"


def test_normalize_input_keep_whitespace():
    """Test whitespace is preserved when stripping is off."""
    assert normalize_input("  main \n", strip_whitespace=False) == "  main "


@pytest.mark.parametrize("text", ["", "\n", "   "])
def test_normalize_input_empty(text):
    """Test empty and blank inputs normalize to the empty string."""
    assert normalize_input(text) == ""


def test_process_inputs():
    """Test both inputs are normalized."""
    result = process_inputs("main\n", " feature/foo ")
    assert result == ("main", "feature/foo")


def test_process_inputs_keep_whitespace():
    """Test whitespace option applies to both inputs."""
    result = process_inputs(" a\n", "b \n", strip_whitespace=False)
    assert result == (" a", "b ")


def test_normalize_input_skips_leading_blank_lines():
    """Test leading blank lines do not hide the content."""
    assert normalize_input("\n  \nmain\n") == "main"


def test_normalize_input_skips_blank_lines_keep_whitespace():
    """Test blank lines are skipped even when whitespace is kept."""
    assert normalize_input("\n main \n", strip_whitespace=False) == " main "
