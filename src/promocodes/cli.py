import logging

import click

from promocodes.errors import PromoCodeError

logger = logging.getLogger(__name__)


def _parse_count(value) -> int:
    """Parse the COUNT argument into a positive int. Raises click.BadParameter on invalid input."""
    try:
        count = int(value)
        if count < 1:
            raise ValueError
        return count
    except (TypeError, ValueError):
        raise click.BadParameter(
            f"Must be a positive integer, got '{value}'.", param_hint="'COUNT'"
        )


def _fail(error: PromoCodeError) -> click.ClickException:
    """Wrap a PromoCodeError with the name of the stage that raised it."""
    logger.debug("%s failed", error.stage, exc_info=error)
    return click.ClickException(f"{error.stage}: {error}")


class _MutuallyExclusiveOption(click.Option):
    """Click option that is mutually exclusive with another option."""

    def __init__(self, *args, **kwargs):
        self.mutually_exclusive = set(kwargs.pop("mutually_exclusive", []))
        super().__init__(*args, **kwargs)

    def handle_parse_result(self, ctx, opts, args):
        for name in self.mutually_exclusive:
            if name in opts and self.name in opts:
                raise click.UsageError(
                    f"--{self.name} and --{name} are mutually exclusive."
                )
        return super().handle_parse_result(ctx, opts, args)


@click.command()
@click.argument("count", required=False, default=None)
@click.option("--wordlist", "-w", default=None, type=click.Path(dir_okay=False), help="Word list file, one word per line. Defaults to /usr/share/dict/words.")
@click.option("--min-len", default=None, type=int, help="Shortest word length to accept (default 3).")
@click.option("--max-len", default=None, type=int, help="Longest word length to accept (default 6).")
@click.option("--seed", default=None, type=int, help="Seed for reproducible codes and colors.")
@click.option("--display", "-d", "display_name", default=None, help="How to show the codes: interactive or plain.")
@click.option("--preset", default=None, help="Load settings from a named preset (e.g. short, long).")
@click.option("--list-presets", is_flag=True, default=False, help="List available presets and exit.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show debug output.", cls=_MutuallyExclusiveOption, mutually_exclusive=["quiet"])
@click.option("--quiet", "-q", is_flag=True, default=False, help="Suppress all output except errors.", cls=_MutuallyExclusiveOption, mutually_exclusive=["verbose"])
@click.option("--log-file", default=None, type=click.Path(), help="Write structured log to file.")
def cli(count, wordlist, min_len, max_len, seed, display_name, preset, list_presets, verbose, quiet, log_file):
    """Generate COUNT unique three-word promo codes (default 3).

    Codes are shown one per line in random colors. In the interactive
    display press any key to recolor, q or ctrl+c to quit.
    """
    from promocodes.config import list_presets as _list_presets, load_config
    from promocodes.display import get_display, list_displays
    from promocodes.generate import generate_codes, make_rng
    from promocodes.logging_config import setup_logging
    from promocodes.wordlist import load_wordlist

    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    if list_presets:
        for name in _list_presets():
            click.echo(name)
        return

    if count is not None:
        count = _parse_count(count)

    overrides = {
        "count": count,
        "wordlist": wordlist,
        "min_len": min_len,
        "max_len": max_len,
        "display": display_name,
    }
    try:
        cfg = load_config(preset, overrides)
    except FileNotFoundError as e:
        raise click.BadParameter(str(e), param_hint="'--preset'")
    except PromoCodeError as e:
        raise _fail(e)
    count = _parse_count(cfg["count"])

    try:
        display = get_display(cfg["display"])
    except KeyError:
        raise click.BadParameter(
            f"Unknown display '{cfg['display']}'. Available: {', '.join(list_displays())}.",
            param_hint="'--display'",
        )

    try:
        words = load_wordlist(cfg["wordlist"], cfg["min_len"], cfg["max_len"])
        rng = make_rng(seed)
        codes = generate_codes(words, count, rng)
        display.show(codes, rng)
    except PromoCodeError as e:
        raise _fail(e)


if __name__ == "__main__":
    cli()
