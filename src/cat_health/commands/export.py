"""Export report command."""

from datetime import date

import click

from ..db import HealthRecordRepository, SettingsRepository, WeightRecordRepository
from ..generators.report import ReportConfig, VetReportGenerator, report_filename
from ..models.weight import WeightUnit
from .base import (
    async_command,
    cat_option,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    resolve_cat,
)


@click.command()
@cat_option
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--clipboard",
    "-c",
    is_flag=True,
    help="Copy to clipboard instead of printing",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Write to file instead of stdout",
)
@click.option("--save", "-s", is_flag=True, help="Write to a file with a generated name")
@click.option(
    "--unit",
    type=click.Choice([u.value for u in WeightUnit]),
    default=None,
    help="Weight unit (defaults to preferred unit)",
)
@click.option(
    "--max-records",
    type=click.IntRange(min=1),
    default=30,
    show_default=True,
    help="Most recent records to include",
)
@click.pass_context
@async_command
async def export(
    ctx,
    cat_id: str | None,
    format: str,
    clipboard: bool,
    output: str | None,
    save: bool,
    unit: str | None,
    max_records: int,
):
    """Export a vet report for a cat.

    Examples:
        # Print the report
        cat-health export

        # Save with a generated file name
        cat-health export --save

        # Export as JSON in pounds
        cat-health export --format json --unit lbs -o report.json
    """
    ensure_initialized(ctx)
    cat = await resolve_cat(ctx, cat_id)

    weight_unit = WeightUnit(unit) if unit else await SettingsRepository().get_preferred_unit()
    today = date.today()
    generator = VetReportGenerator(
        ReportConfig(weight_unit=weight_unit, max_records=max_records, generated_on=today)
    )

    health_records = await HealthRecordRepository().list_for_cat(cat.id)
    weight_records = await WeightRecordRepository().list_for_cat(cat.id)

    if format == "json":
        content = generator.generate_json(cat, health_records, weight_records)
    else:
        content = generator.generate_text(cat, health_records, weight_records)

    if save and not output:
        output = report_filename(cat, today, "json" if format == "json" else "txt")

    if clipboard:
        try:
            import pyperclip

            pyperclip.copy(content)
            echo_success("Copied to clipboard!")
        except ImportError:
            echo_error(
                "pyperclip not installed. Install with: pip install cat-health[clipboard]"
            )
            ctx.exit(1)

    elif output:
        with open(output, "w") as f:
            f.write(content)
        echo_success(f"Exported to {output}")
        included_health = min(len(health_records), max_records)
        included_weight = min(len(weight_records), max_records)
        echo_info(f"{included_health} health and {included_weight} weight record(s) included")

    else:
        click.echo(content)
