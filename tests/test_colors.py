import pytest

from irpfm.colors import RESET, Color, colorize


def test_cyan_escape_matches_terminal_code():
    assert colorize("", Color.CYAN) == "\033[0;35m\033[0m"


def test_reset_escape():
    assert colorize("x", Color.CYAN).endswith("\033[0m")
    assert RESET == "\033[0m"


def test_bright_white_escape():
    assert colorize("w", Color.WHITE) == "\033[1;37mw\033[0m"


@pytest.mark.parametrize("color", list(Color))
def test_colorize_wraps_text(color):
    result = colorize("use", color)
    assert result.startswith(color.value)
    assert result.endswith(RESET)
    assert result[len(color.value):-len(RESET)] == "use"


def test_colorize_accepts_raw_escape():
    assert colorize("x", "\033[0;34m") == Color.STRAND.value + "x" + RESET


def test_colorize_rejects_unknown_escape():
    with pytest.raises(ValueError):
        colorize("x", "\033[9;99m")


def test_all_colors_distinct():
    wrapped = {colorize("", c) for c in Color}
    assert len(wrapped) == 16