"""Shared CLI utilities."""

import asyncio
import math
from functools import wraps
from pathlib import Path

import click

from ..config import Settings
from ..db import CatRepository, SettingsRepository, get_db_path
from ..models.cat import Cat

MAX_WEIGHT = 50.0


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_data_dir() -> Path:
    """Get the data directory path."""
    return Settings.from_env().data_dir


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'cat-health init' first."
        )
        ctx.exit(1)


async def resolve_cat(ctx: click.Context, cat_id: str | None) -> Cat:
    """Find the cat a command should act on.

    Uses the explicit ID if given, then the selected cat, then the only
    cat when exactly one exists. Exits with an error otherwise.
    """
    cat_repo = CatRepository()

    if cat_id is None:
        cat_id = await SettingsRepository().get_selected_cat_id()

    if cat_id is None:
        cats = await cat_repo.list_all()
        if len(cats) == 1:
            return cats[0]
        if not cats:
            echo_error("No cats yet. Add one with 'cat-health cats add NAME'.")
        else:
            echo_error("Several cats found. Pass --cat ID or run 'cat-health cats select ID'.")
        ctx.exit(1)

    cat = await cat_repo.get(cat_id)
    if cat is None:
        echo_error(f"Cat {cat_id} not found.")
        ctx.exit(1)
    return cat


def validate_weight(value: float) -> float:
    """Reject implausible weights before they reach storage."""
    if not math.isfinite(value) or value <= 0 or value > MAX_WEIGHT:
        raise click.BadParameter(f"weight must be between 0 and {MAX_WEIGHT:g}")
    return value


def cat_option(f):
    """Add the shared --cat option."""
    return click.option(
        "--cat", "cat_id", default=None, help="Cat ID (defaults to the selected cat)"
    )(f)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row))
        )

    return "\n".join(line.rstrip() for line in lines)
