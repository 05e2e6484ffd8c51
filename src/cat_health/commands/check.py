"""Daily health check commands."""

from datetime import date

import click
from loguru import logger

from ..clients.questionnaire import QUESTIONS, QuestionnaireClient
from ..db import HealthRecordRepository
from ..models.health import HealthAnswers, HealthRecord, HealthStatus
from ..services.scoring import MAX_SCORE
from ..services.streaks import calculate_streak
from ..services.tips import HealthTip, Urgency, get_health_tips
from .base import (
    async_command,
    cat_option,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    resolve_cat,
)

STATUS_COLORS = {
    HealthStatus.EXCELLENT: "green",
    HealthStatus.GOOD: "blue",
    HealthStatus.WARNING: "yellow",
    HealthStatus.CRITICAL: "red",
}

URGENCY_COLORS = {
    Urgency.HIGH: "red",
    Urgency.MEDIUM: "yellow",
    Urgency.LOW: "green",
}


def parse_answers(values: tuple[str, ...]) -> HealthAnswers:
    """Parse ``category=code`` pairs into answers.

    Raises:
        click.BadParameter: For malformed pairs, unknown categories or codes.
    """
    valid = {q.category: q.codes for q in QUESTIONS}
    answers = HealthAnswers()
    for value in values:
        category, sep, code = value.partition("=")
        category, code = category.strip(), code.strip()
        if not sep or not code:
            raise click.BadParameter(f"expected CATEGORY=CODE, got '{value}'")
        if category not in valid:
            raise click.BadParameter(
                f"unknown category '{category}' (choose from {', '.join(valid)})"
            )
        if code not in valid[category]:
            raise click.BadParameter(
                f"invalid answer '{code}' for {category} "
                f"(choose from {', '.join(valid[category])})"
            )
        setattr(answers, category, code)
    return answers


def render_tips(tips: list[HealthTip]) -> None:
    """Print tips, or an all-clear message when there are none."""
    if not tips:
        echo_success("All clear! Nothing needs attention today.")
        return

    for tip in tips:
        urgency = click.style(
            f"[{tip.urgency.value.upper()}]", fg=URGENCY_COLORS[tip.urgency]
        )
        click.echo(f"{urgency} {click.style(tip.title, bold=True)} ({tip.category})")
        for suggestion in tip.tips:
            click.echo(f"    - {suggestion}")
        click.echo()


def render_record(record: HealthRecord) -> None:
    status = record.status
    click.echo()
    click.echo(click.style("Health Score", bold=True))
    click.echo("=" * 40)
    click.echo(
        f"{record.percentage}%  "
        + click.style(status.label, fg=STATUS_COLORS[status], bold=True)
        + f"  ({record.score}/{MAX_SCORE} points)"
    )
    click.echo(status.message)
    click.echo()


@click.command()
@cat_option
@click.option(
    "--answer",
    "-a",
    "answer_values",
    multiple=True,
    help="Answer as CATEGORY=CODE (repeat for all eight questions)",
)
@click.pass_context
@async_command
async def check(ctx, cat_id: str | None, answer_values: tuple[str, ...]):
    """Record today's health check.

    Runs the interactive questionnaire when no --answer is given.
    Otherwise all eight answers must be passed with --answer. Checking
    again on the same day replaces the earlier record.

    Examples:
        cat-health check

        cat-health check -a eating=2-3 -a water=normal -a pee=2-4 \\
            -a poop=normal -a activity=normal -a mood=playful \\
            -a vomiting=no -a appetite=normal
    """
    ensure_initialized(ctx)
    cat = await resolve_cat(ctx, cat_id)
    repo = HealthRecordRepository()
    today = date.today()

    if answer_values:
        answers = parse_answers(answer_values)
    else:
        existing = await repo.get_today(cat.id, today)
        if existing:
            echo_info("Already checked today, your new answers will replace it.")
        answers = await QuestionnaireClient().collect_answers(
            cat.name, existing.answers if existing else None
        )
        if answers is None:
            echo_warning("Check cancelled")
            return

    try:
        record = HealthRecord.from_answers(cat.id, answers, today)
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)

    await repo.save(record)
    logger.info(f"Saved health check for {cat.name}: {record.percentage}%")

    render_record(record)
    click.echo(click.style("Tips", bold=True))
    click.echo("-" * 40)
    render_tips(get_health_tips(record.answers))

    streak = calculate_streak(await repo.dates_for_cat(cat.id), today)
    click.echo(f"Streak: {streak.current} day(s)" + (" - on fire!" if streak.is_on_fire else ""))


@click.command()
@cat_option
@click.pass_context
@async_command
async def tips(ctx, cat_id: str | None):
    """Show care tips based on today's check."""
    ensure_initialized(ctx)
    cat = await resolve_cat(ctx, cat_id)

    record = await HealthRecordRepository().get_today(cat.id)
    if record is None:
        echo_info(f"No check for {cat.name} today. Run 'cat-health check' first.")
        return

    click.echo()
    click.echo(click.style(f"Tips for {cat.name}", bold=True))
    click.echo("=" * 40)
    render_tips(get_health_tips(record.answers))
