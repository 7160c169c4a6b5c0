"""gitroot CLI entrypoint."""

import logging
import sys

import click

from gitroot.config import DebugConfig, get_config
from gitroot.errors import GitRootError
from gitroot.probes.repo import find_repository_root

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for gitroot.

    Logs go to stderr so stdout carries nothing but the repository root.

    Args:
        verbose: If True, log at DEBUG level; otherwise WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


@click.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.pass_context
def gitroot(ctx: click.Context) -> None:
    """
    Print the top-level directory of the current git repository.

    Takes no options; any arguments given are ignored.
    Output is exactly what git printed, trailing newline included.
    """
    _setup_logging(verbose=DebugConfig.from_env().enabled)
    config = get_config()
    if ctx.args:
        logger.debug(f"Ignoring arguments: {ctx.args}")

    try:
        root = find_repository_root(timeout=config.timeout)
    except GitRootError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(e.exit_code)

    # color=True keeps escape sequences in the path when stdout is piped
    click.echo(root, nl=False, color=True)


def main() -> None:
    """Console script entrypoint."""
    gitroot()
