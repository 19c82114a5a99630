"""Tests for the display registry and built-in displays."""

from unittest.mock import patch

import click
import pytest

from promocodes.generate import make_rng

CODES = ["cat-dog-owl", "owl-owl-bee", "bee-cat-dog"]


def test_display_registry_has_builtins():
    from promocodes.display import list_displays

    assert list_displays() == ["interactive", "plain"]


def test_get_display_returns_instance():
    from promocodes.display import get_display
    from promocodes.display.base import CodeDisplay

    display = get_display("plain")
    assert isinstance(display, CodeDisplay)
    assert display.name == "plain"


def test_get_display_unknown_raises():
    from promocodes.display import get_display

    with pytest.raises(KeyError, match="fancy"):
        get_display("fancy")


def test_random_color_channels_in_range():
    from promocodes.display.builtin import random_color

    rng = make_rng(1)
    for _ in range(500):
        color = random_color(rng)
        assert len(color) == 3
        assert all(0 <= c <= 255 for c in color)


def test_render_one_colored_line_per_code():
    from promocodes.display.builtin import render

    rendered = render(CODES, make_rng(2))
    lines = rendered.split("\n")
    assert len(lines) == 3
    assert all(line.startswith("\x1b[38;2;") for line in lines)
    assert click.unstyle(rendered).split("\n") == CODES


def test_render_recolors_each_call():
    from promocodes.display.builtin import render

    rng = make_rng(3)
    assert render(CODES, rng) != render(CODES, rng)


def test_render_does_not_modify_codes():
    from promocodes.display.builtin import render

    codes = list(CODES)
    render(codes, make_rng(4))
    assert codes == CODES


def test_plain_display_prints_once(capsys):
    from promocodes.display import get_display

    get_display("plain").show(CODES, make_rng(5))
    out = click.unstyle(capsys.readouterr().out)
    assert out.splitlines() == CODES


def _run_interactive(keys):
    from promocodes.display.builtin import InteractiveDisplay

    with patch("promocodes.display.builtin.click.getchar", side_effect=keys) as getchar, \
            patch("promocodes.display.builtin.click.echo") as echo, \
            patch("promocodes.display.builtin.click.clear"):
        InteractiveDisplay().show(CODES, make_rng(6))
    return getchar, echo


@pytest.mark.parametrize("quit_key", ["q", "Q", "\x03", "\x04", ""])
def test_interactive_display_quit_keys(quit_key):
    getchar, echo = _run_interactive([quit_key])
    assert getchar.call_count == 1
    assert echo.call_count == 1


def test_interactive_display_rerenders_on_other_keys():
    getchar, echo = _run_interactive(["x", " ", "q"])
    assert echo.call_count == 3
    renders = [call.args[0] for call in echo.call_args_list]
    assert all(click.unstyle(r).split("\n") == CODES for r in renders)


@pytest.mark.parametrize("exc", [KeyboardInterrupt, EOFError])
def test_interactive_display_quits_on_interrupt(exc):
    getchar, echo = _run_interactive(exc)
    assert echo.call_count == 1


def test_interactive_display_terminal_error():
    from promocodes.display.builtin import InteractiveDisplay
    from promocodes.errors import DisplayFailure

    with patch("promocodes.display.builtin.click.getchar", side_effect=OSError("no tty")), \
            patch("promocodes.display.builtin.click.echo"), \
            patch("promocodes.display.builtin.click.clear"):
        with pytest.raises(DisplayFailure, match="no tty"):
            InteractiveDisplay().show(CODES, make_rng(7))


def test_plain_display_write_error():
    from promocodes.display.builtin import PlainDisplay
    from promocodes.errors import DisplayFailure

    with patch("promocodes.display.builtin.click.echo", side_effect=BrokenPipeError("closed")):
        with pytest.raises(DisplayFailure):
            PlainDisplay().show(CODES)


def test_interactive_display_interrupt_while_drawing():
    """ctrl+c during a redraw quits the same way as at the key prompt."""
    from promocodes.display.builtin import InteractiveDisplay

    with patch("promocodes.display.builtin.click.getchar", return_value="x") as getchar, \
            patch("promocodes.display.builtin.click.echo", side_effect=[None, KeyboardInterrupt]) as echo, \
            patch("promocodes.display.builtin.click.clear"):
        InteractiveDisplay().show(CODES, make_rng(8))
    assert echo.call_count == 2
    assert getchar.call_count == 1


def test_cli_interrupt_while_drawing_exits_cleanly(tmp_path):
    """An interrupt during a redraw still exits with status 0."""
    from click.testing import CliRunner
    from promocodes.cli import cli

    words = tmp_path / "words"
    words.write_text("cat\ndog\nowl\n")
    runner = CliRunner()
    with patch("promocodes.display.builtin.click.clear", side_effect=KeyboardInterrupt):
        result = runner.invoke(cli, ["2", "-w", str(words)])
    assert result.exit_code == 0
    assert "Aborted" not in result.output
