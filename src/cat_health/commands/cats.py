"""Cat management commands."""

import click
from loguru import logger

from ..db import CatRepository, HealthRecordRepository, SettingsRepository
from ..models.cat import Cat
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
)


@click.group()
@click.pass_context
def cats(ctx):
    """Manage your cats.

    Add, rename, remove and select the cat other commands act on.
    """
    ensure_initialized(ctx)


@cats.command()
@click.argument("name")
@click.option("--photo", default=None, help="Path or URL of a photo")
@click.pass_context
@async_command
async def add(ctx, name: str, photo: str | None):
    """Add a new cat and select it."""
    try:
        cat = Cat(name=name, photo=photo)
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)

    await CatRepository().create(cat)
    await SettingsRepository().set_selected_cat_id(cat.id)
    logger.info(f"Added cat {cat.name} ({cat.id})")

    echo_success(f"Added {cat.name} (ID: {cat.id})")


@cats.command(name="list")
@async_command
async def list_cats():
    """List all cats."""
    all_cats = await CatRepository().list_all()
    if not all_cats:
        echo_info("No cats yet. Add one with 'cat-health cats add NAME'")
        return

    selected = await SettingsRepository().get_selected_cat_id()
    health_repo = HealthRecordRepository()

    headers = ["", "ID", "Name", "Records", "Added"]
    rows = []
    for cat in all_cats:
        records = await health_repo.dates_for_cat(cat.id)
        rows.append([
            "*" if cat.id == selected else "",
            cat.id,
            cat.name,
            str(len(records)),
            cat.created_at.strftime("%Y-%m-%d"),
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(all_cats)} cat(s)")


@cats.command()
@click.argument("cat_id")
@click.pass_context
@async_command
async def show(ctx, cat_id: str):
    """Show a cat's profile."""
    cat = await CatRepository().get(cat_id)
    if not cat:
        echo_error(f"Cat {cat_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo(click.style(cat.name, bold=True))
    click.echo("=" * 40)
    click.echo(f"ID: {cat.id}")
    click.echo(f"Photo: {cat.photo or '-'}")
    click.echo(f"Added: {cat.created_at.strftime('%Y-%m-%d %H:%M')}")


@cats.command()
@click.argument("cat_id")
@click.option("--name", default=None, help="New name")
@click.option("--photo", default=None, help="New photo path or URL")
@click.option("--remove-photo", is_flag=True, help="Clear the photo")
@click.pass_context
@async_command
async def edit(ctx, cat_id: str, name: str | None, photo: str | None, remove_photo: bool):
    """Edit a cat's name or photo."""
    repo = CatRepository()
    cat = await repo.get(cat_id)
    if not cat:
        echo_error(f"Cat {cat_id} not found")
        ctx.exit(1)

    try:
        if name is not None:
            cat.rename(name)
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)

    if remove_photo:
        cat.photo = None
    elif photo is not None:
        cat.photo = photo

    await repo.update(cat)
    logger.info(f"Edited cat {cat.id}")
    echo_success(f"Updated {cat.name}")


@cats.command()
@click.argument("cat_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, cat_id: str, yes: bool):
    """Delete a cat and all of its records."""
    repo = CatRepository()
    cat = await repo.get(cat_id)
    if not cat:
        echo_error(f"Cat {cat_id} not found")
        ctx.exit(1)

    if not yes and not click.confirm(
        f"Delete {cat.name} and all health and weight records?"
    ):
        echo_info("Cancelled")
        return

    await repo.delete(cat_id)
    logger.info(f"Deleted cat {cat_id}")
    echo_success(f"Deleted {cat.name}")


@cats.command()
@click.argument("cat_id")
@click.pass_context
@async_command
async def select(ctx, cat_id: str):
    """Select the cat other commands act on by default."""
    cat = await CatRepository().get(cat_id)
    if not cat:
        echo_error(f"Cat {cat_id} not found")
        ctx.exit(1)

    await SettingsRepository().set_selected_cat_id(cat.id)
    echo_success(f"Selected {cat.name}")
