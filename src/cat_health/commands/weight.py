"""Weight tracking commands."""

from datetime import date

import click
from loguru import logger

from ..db import SettingsRepository, WeightGoalRepository, WeightRecordRepository
from ..models.weight import WeightGoal, WeightRecord, WeightStatus, WeightUnit
from ..services.weight import evaluate_weight
from ..utils.units import convert_weight
from .base import (
    async_command,
    cat_option,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
    resolve_cat,
    validate_weight,
)

UNIT_CHOICE = click.Choice([u.value for u in WeightUnit])


async def _evaluate(cat_id: str):
    goal = await WeightGoalRepository().get(cat_id)
    latest = await WeightRecordRepository().get_latest(cat_id)
    unit = await SettingsRepository().get_preferred_unit()
    return evaluate_weight(latest, goal, unit)


def render_evaluation(evaluation) -> None:
    """Print the weight alert banner."""
    if evaluation.status == WeightStatus.IN_RANGE:
        echo_success(evaluation.describe())
    elif evaluation.needs_attention:
        echo_warning(evaluation.describe())
    else:
        echo_info(evaluation.describe())


@click.group()
@click.pass_context
def weight(ctx):
    """Log weights and manage the healthy weight range."""
    ensure_initialized(ctx)


@weight.command()
@click.argument("value", type=float)
@click.option("--unit", "-u", type=UNIT_CHOICE, default=None, help="Defaults to preferred unit")
@cat_option
@click.pass_context
@async_command
async def log(ctx, value: float, unit: str | None, cat_id: str | None):
    """Log today's weight (replaces any weight logged earlier today)."""
    validate_weight(value)
    cat = await resolve_cat(ctx, cat_id)
    settings = SettingsRepository()
    unit = WeightUnit(unit) if unit else await settings.get_preferred_unit()

    record = WeightRecord(cat_id=cat.id, date=date.today(), weight=value, unit=unit)
    await WeightRecordRepository().save(record)
    # The unit used for logging becomes the preferred unit
    await settings.set_preferred_unit(unit)
    logger.info(f"Logged weight {value} {unit.value} for {cat.name}")

    echo_success(f"Logged {value} {unit.value} for {cat.name}")
    render_evaluation(await _evaluate(cat.id))


@weight.command(name="list")
@cat_option
@click.pass_context
@async_command
async def list_weights(ctx, cat_id: str | None):
    """List logged weights, newest first."""
    cat = await resolve_cat(ctx, cat_id)
    records = await WeightRecordRepository().list_for_cat(cat.id)
    if not records:
        echo_info(f"No weights logged for {cat.name} yet.")
        return

    unit = await SettingsRepository().get_preferred_unit()
    rows = [
        [r.day_key, f"{convert_weight(r.weight, r.unit, unit)} {unit.value}", f"{r.weight} {r.unit.value}"]
        for r in records
    ]
    click.echo()
    click.echo(format_table(["Date", "Weight", "As logged"], rows))


@weight.command()
@click.argument("day", type=click.DateTime(formats=["%Y-%m-%d"]))
@cat_option
@click.pass_context
@async_command
async def delete(ctx, day, cat_id: str | None):
    """Delete the weight logged on DAY (YYYY-MM-DD)."""
    cat = await resolve_cat(ctx, cat_id)
    if await WeightRecordRepository().delete(cat.id, day.date()):
        echo_success(f"Deleted weight for {day.date().isoformat()}")
    else:
        echo_error(f"No weight logged on {day.date().isoformat()}")
        ctx.exit(1)


@weight.command()
@cat_option
@click.pass_context
@async_command
async def status(ctx, cat_id: str | None):
    """Compare the latest weight with the goal range."""
    cat = await resolve_cat(ctx, cat_id)
    render_evaluation(await _evaluate(cat.id))


@weight.group()
def goal():
    """Set or clear the healthy weight range."""


@goal.command(name="set")
@click.argument("min_weight", type=float)
@click.argument("max_weight", type=float)
@click.option("--unit", "-u", type=UNIT_CHOICE, default=None, help="Defaults to preferred unit")
@cat_option
@click.pass_context
@async_command
async def set_goal(ctx, min_weight: float, max_weight: float, unit: str | None, cat_id: str | None):
    """Set the healthy range MIN_WEIGHT to MAX_WEIGHT."""
    cat = await resolve_cat(ctx, cat_id)
    unit = WeightUnit(unit) if unit else await SettingsRepository().get_preferred_unit()

    try:
        new_goal = WeightGoal(cat_id=cat.id, min_weight=min_weight, max_weight=max_weight, unit=unit)
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)

    await WeightGoalRepository().set(new_goal)
    logger.info(f"Set weight goal for {cat.name}")
    echo_success(f"Target range: {min_weight} - {max_weight} {unit.value}")
    render_evaluation(await _evaluate(cat.id))


@goal.command(name="clear")
@cat_option
@click.pass_context
@async_command
async def clear_goal(ctx, cat_id: str | None):
    """Remove the weight goal."""
    cat = await resolve_cat(ctx, cat_id)
    await WeightGoalRepository().delete(cat.id)
    echo_success(f"Weight goal removed for {cat.name}")


@click.command()
@click.argument("new_unit", required=False, type=UNIT_CHOICE)
@click.pass_context
@async_command
async def unit(ctx, new_unit: str | None):
    """Show or set the preferred weight unit."""
    ensure_initialized(ctx)
    settings = SettingsRepository()
    if new_unit is None:
        click.echo((await settings.get_preferred_unit()).value)
        return

    await settings.set_preferred_unit(new_unit)
    echo_success(f"Preferred unit set to {new_unit}")
