"""CLI entry point for cat-health."""

import click

from . import __version__
from .commands import cats, check, export, history, init, streak, tips, unit, weight
from .config import Settings
from .utils.logging import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="cat-health")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log verbosity (overrides CAT_HEALTH_LOG_LEVEL)",
)
@click.option("--log-file", type=click.Path(), default=None, help="Also log to this file")
def main(log_level: str | None, log_file: str | None):
    """cat-health: daily wellness tracking for your cat.

    Answer eight quick questions a day to get a wellness score, log
    weights against a healthy range, and export a report for your vet.

    Example usage:

        # Set up the database
        cat-health init

        # Add a cat and check in
        cat-health cats add Mochi
        cat-health check

        # Track weight
        cat-health weight goal set 3.5 5.5 --unit kg
        cat-health weight log 4.2

        # See how things are going
        cat-health history
        cat-health export --save
    """
    settings = Settings.from_env()
    setup_logging(level=(log_level or settings.log_level).upper(), log_file=log_file)


main.add_command(init)
main.add_command(cats)
main.add_command(check)
main.add_command(tips)
main.add_command(history)
main.add_command(streak)
main.add_command(weight)
main.add_command(unit)
main.add_command(export)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
