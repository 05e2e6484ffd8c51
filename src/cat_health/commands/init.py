"""Initialize project command."""

import click
from loguru import logger

from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success, get_data_dir


@click.command()
@async_command
async def init():
    """Initialize the cat-health data directory and database.

    Safe to run again on an existing database.
    """
    data_dir = get_data_dir()
    echo_info(f"Initializing cat-health in {data_dir}")

    db_path = get_db_path(data_dir)
    await init_db(db_path)
    logger.info(f"Initialized database {db_path}")
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Add your cat:            cat-health cats add Mochi")
    click.echo("  2. Do today's health check: cat-health check")
    click.echo("  3. Log a weight:            cat-health weight log 4.2 --unit kg")
