"""Built-in code displays."""

from __future__ import annotations

import logging
import random

import click

from promocodes.errors import DisplayFailure
from promocodes.generate import make_rng

logger = logging.getLogger(__name__)

# q, ctrl+c, ctrl+d; an empty read means stdin hit EOF.
_QUIT_KEYS = {"q", "Q", "\x03", "\x04", ""}


def random_color(rng: random.Random) -> tuple[int, int, int]:
    """Return an RGB triple with each channel uniform in [0, 255]."""
    return rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255)


def render(codes: list[str], rng: random.Random) -> str:
    """Render one code per line, each in its own random foreground color."""
    return "\n".join(click.style(code, fg=random_color(rng)) for code in codes)


class PlainDisplay:
    """Print the codes once and return."""

    @property
    def name(self) -> str:
        return "plain"

    def show(self, codes: list[str], rng: random.Random | None = None) -> None:
        rng = rng or make_rng()
        try:
            click.echo(render(codes, rng))
        except OSError as e:
            raise DisplayFailure(f"Cannot write codes to the terminal: {e}") from e


class InteractiveDisplay:
    """Redraw the codes in fresh colors on every keypress until a quit key.

    Quit keys are q, ctrl+c and ctrl+d. Any other key re-renders.
    """

    @property
    def name(self) -> str:
        return "interactive"

    def show(self, codes: list[str], rng: random.Random | None = None) -> None:
        rng = rng or make_rng()
        renders = 0
        try:
            while True:
                click.clear()
                click.echo(render(codes, rng))
                renders += 1
                if click.getchar() in _QUIT_KEYS:
                    break
        except (KeyboardInterrupt, EOFError):
            pass
        except OSError as e:
            raise DisplayFailure(f"Cannot run interactive display: {e}") from e
        logger.debug("Interactive display closed after %d renders", renders)
