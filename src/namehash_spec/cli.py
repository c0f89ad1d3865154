"""compute-hashes: print ENS namehashes, one per line."""

from __future__ import annotations

import json
import logging
from typing import Tuple

import click

from .config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_NAMES,
    ENV_LOG_LEVEL,
    ENV_NORMALIZE,
    LOG_FORMAT,
)
from .errors import SpecError
from .namehash import namehash_hex

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.command(name="compute-hashes")
@click.argument("names", nargs=-1)
@click.option(
    "--normalize/--no-normalize",
    default=False,
    envvar=ENV_NORMALIZE,
    show_default=True,
    help="Apply NFC + lowercase folding before hashing.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["hex", "json"]),
    default="hex",
    show_default=True,
    help="hex: one digest per line; json: object mapping name to digest.",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    envvar=ENV_LOG_LEVEL,
    show_default=True,
)
def main(names: Tuple[str, ...], normalize: bool, output_format: str, log_level: str) -> None:
    """Print the namehash of each NAME (default: lit, reverse, addr.reverse)."""
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)

    if not names:
        names = DEFAULT_NAMES
    logger.debug("hashing %d name(s), normalize=%s", len(names), normalize)

    digests = {}
    for name in names:
        try:
            digests[name] = namehash_hex(name, normalize=normalize)
        except SpecError as e:
            raise click.BadParameter(str(e), param_hint=f"NAME {name!r}") from e
        logger.info("%s -> %s", name, digests[name])

    if output_format == "json":
        click.echo(json.dumps(digests, indent=2))
        return
    for name in names:
        click.echo(digests[name])


if __name__ == "__main__":
    main()
