"""Vet report generator.

Renders a cat's recent health and weight history into a report that can
be printed, saved or handed to a veterinarian. Two formats are supported:

- ``text``: a fixed-width plain text document
- ``json``: the same content as structured data

Example (text):
```
CAT HEALTH REPORT
=================
Mochi
Report Generated: Monday, January 15, 2024

Summary Statistics
------------------
Avg Health Score: 88%   Latest Score: 95%   Health Records: 12
Status Breakdown: Excellent: 9  |  Good: 3
Weight: Current 4.2 kg  |  Range: 4.0 - 4.3 kg  |  5 records
```
"""

import json
import re
from dataclasses import dataclass, field
from datetime import date

from ..models.cat import Cat
from ..models.health import HealthRecord
from ..models.weight import WeightRecord, WeightUnit
from ..services.history import key_observations, summarize_health, summarize_weights
from ..utils.units import convert_weight

OBSERVATION_WIDTH = 40
DISCLAIMER = (
    "This report is generated from owner observations and is not a "
    "substitute for professional veterinary advice."
)


@dataclass
class ReportConfig:
    """Configuration for report generation."""

    weight_unit: WeightUnit = WeightUnit.KG
    max_records: int = 30
    generated_on: date = field(default_factory=date.today)


def report_filename(cat: Cat, generated_on: date, extension: str = "txt") -> str:
    """Suggested file name, e.g. ``Mr_Whiskers_health_report_2024-01-15.txt``."""
    safe_name = re.sub(r"[^a-zA-Z0-9]", "_", cat.name)
    return f"{safe_name}_health_report_{generated_on.isoformat()}.{extension}"


def _truncate(text: str, width: int = OBSERVATION_WIDTH) -> str:
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


class VetReportGenerator:
    """Generates vet reports from stored records."""

    def __init__(self, config: ReportConfig | None = None):
        self.config = config or ReportConfig()

    def _recent(self, records):
        ordered = sorted(records, key=lambda r: r.date, reverse=True)
        return ordered[: self.config.max_records]

    def build(
        self,
        cat: Cat,
        health_records: list[HealthRecord],
        weight_records: list[WeightRecord],
    ) -> dict:
        """Collect the report content as a dictionary."""
        unit = WeightUnit(self.config.weight_unit)
        health = self._recent(health_records)
        weights = self._recent(weight_records)
        health_summary = summarize_health(health)
        weight_summary = summarize_weights(weights, unit)

        return {
            "cat": {"id": cat.id, "name": cat.name},
            "generated_on": self.config.generated_on.isoformat(),
            "health_summary": health_summary.to_dict() if health_summary else None,
            "weight_summary": weight_summary.to_dict() if weight_summary else None,
            "health_records": [
                {
                    "date": r.day_key,
                    "percentage": r.percentage,
                    "status": r.status.value,
                    "observations": key_observations(r.answers),
                }
                for r in health
            ],
            "weight_records": [
                {
                    "date": r.day_key,
                    "weight": convert_weight(r.weight, r.unit, unit),
                    "unit": unit.value,
                }
                for r in weights
            ],
        }

    def generate_json(
        self,
        cat: Cat,
        health_records: list[HealthRecord],
        weight_records: list[WeightRecord],
    ) -> str:
        return json.dumps(self.build(cat, health_records, weight_records), indent=2)

    def generate_text(
        self,
        cat: Cat,
        health_records: list[HealthRecord],
        weight_records: list[WeightRecord],
    ) -> str:
        """Render the report as plain text.

        Args:
            cat: The cat the report is about
            health_records: Health records in any order
            weight_records: Weight records in any order

        Returns:
            The report text
        """
        unit = WeightUnit(self.config.weight_unit)
        health = self._recent(health_records)
        weights = self._recent(weight_records)

        lines = ["CAT HEALTH REPORT", "=" * 17, cat.name]
        lines.append(
            f"Report Generated: {self.config.generated_on.strftime('%A, %B %d, %Y')}"
        )
        lines.append("")

        lines.extend(self._summary_section(health, weights, unit))
        lines.extend(self._health_section(health))
        lines.extend(self._weight_section(weights, unit))

        lines.append("-" * 60)
        lines.append(DISCLAIMER)
        return "\n".join(lines)

    def _summary_section(
        self, health: list[HealthRecord], weights: list[WeightRecord], unit: WeightUnit
    ) -> list[str]:
        health_summary = summarize_health(health)
        weight_summary = summarize_weights(weights, unit)
        if health_summary is None and weight_summary is None:
            return ["No records yet.", ""]

        lines = ["Summary Statistics", "-" * 18]
        if health_summary:
            lines.append(
                f"Avg Health Score: {health_summary.average_percentage}%   "
                f"Latest Score: {health_summary.latest_percentage}%   "
                f"Health Records: {health_summary.count}"
            )
            breakdown = "  |  ".join(
                f"{status.label}: {count}"
                for status, count in health_summary.status_counts.items()
            )
            lines.append(f"Status Breakdown: {breakdown}")
        if weight_summary:
            lines.append(
                f"Weight: Current {weight_summary.latest} {unit.value}  |  "
                f"Range: {weight_summary.minimum} - {weight_summary.maximum} {unit.value}  |  "
                f"{weight_summary.count} records"
            )
        lines.append("")
        return lines

    def _health_section(self, health: list[HealthRecord]) -> list[str]:
        if not health:
            return []

        lines = ["Health Records", "-" * 14]
        lines.append(f"{'Date':<14}{'Score':<8}{'Status':<12}Key Observations")
        for record in health:
            lines.append(
                f"{record.date.strftime('%b %d, %Y'):<14}"
                f"{str(record.percentage) + '%':<8}"
                f"{record.status.label:<12}"
                f"{_truncate(key_observations(record.answers))}"
            )
        lines.append("")
        return lines

    def _weight_section(self, weights: list[WeightRecord], unit: WeightUnit) -> list[str]:
        if not weights:
            return []

        lines = ["Weight History", "-" * 14]
        for record in weights:
            value = convert_weight(record.weight, record.unit, unit)
            lines.append(f"{record.date.strftime('%b %d, %Y'):<14}{value} {unit.value}")
        lines.append("")
        return lines
