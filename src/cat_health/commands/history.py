"""History and streak commands."""

import click

from ..db import HealthRecordRepository
from ..services.history import health_trend, key_observations, summarize_health
from ..services.streaks import calculate_streak
from .base import async_command, cat_option, echo_info, ensure_initialized, format_table, resolve_cat

BAR_WIDTH = 20


@click.command()
@cat_option
@click.option(
    "--limit", "-n", type=click.IntRange(min=1), default=14, show_default=True, help="Records to show"
)
@click.pass_context
@async_command
async def history(ctx, cat_id: str | None, limit: int):
    """Show recent health records and the score trend."""
    ensure_initialized(ctx)
    cat = await resolve_cat(ctx, cat_id)

    records = await HealthRecordRepository().list_for_cat(cat.id)
    if not records:
        echo_info(f"No health records for {cat.name} yet.")
        return

    summary = summarize_health(records)
    click.echo()
    click.echo(click.style(f"{cat.name}'s History", bold=True))
    click.echo(
        f"{summary.count} record(s), average {summary.average_percentage}%, "
        f"latest {summary.latest_percentage}%"
    )
    click.echo()

    rows = [
        [r.day_key, f"{r.percentage}%", r.status.label, key_observations(r.answers)]
        for r in records[:limit]
    ]
    click.echo(format_table(["Date", "Score", "Status", "Observations"], rows))

    points = health_trend(records, limit)
    if len(points) > 1:
        click.echo()
        click.echo(click.style("Trend", bold=True))
        for point in points:
            bar = "#" * round(point.percentage / 100 * BAR_WIDTH)
            click.echo(f"{point.date.strftime('%b %d'):<8}{bar:<{BAR_WIDTH}} {point.percentage}%")


@click.command()
@cat_option
@click.pass_context
@async_command
async def streak(ctx, cat_id: str | None):
    """Show the daily check-in streak."""
    ensure_initialized(ctx)
    cat = await resolve_cat(ctx, cat_id)

    summary = calculate_streak(await HealthRecordRepository().dates_for_cat(cat.id))
    if summary.current == 0 and summary.longest == 0:
        echo_info(f"No check-ins for {cat.name} yet.")
        return

    flame = " (on fire!)" if summary.is_on_fire else ""
    click.echo(f"Current streak: {summary.current} day(s){flame}")
    click.echo(f"Best: {summary.longest} day(s)")
    if summary.is_personal_best:
        click.echo(click.style("New personal best!", fg="yellow"))
    if summary.at_risk:
        click.echo(click.style("Check today to keep it!", fg="yellow"))
