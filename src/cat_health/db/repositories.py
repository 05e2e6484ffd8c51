"""Data access layer for cat-health."""

import json
from datetime import date, datetime
from pathlib import Path

import aiosqlite
from loguru import logger

from ..models.cat import Cat
from ..models.health import HealthAnswers, HealthRecord, HealthStatus
from ..models.weight import WeightGoal, WeightRecord, WeightUnit
from .engine import get_db_path


class CatRepository:
    """Repository for cat profiles."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, cat: Cat) -> str:
        """Store a new cat."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "INSERT INTO cats (id, name, photo, created_at) VALUES (?, ?, ?, ?)",
                (cat.id, cat.name, cat.photo, cat.created_at.isoformat()),
            )
            await db.commit()
        logger.debug(f"Created cat {cat.id} ({cat.name})")
        return cat.id

    async def get(self, cat_id: str) -> Cat | None:
        """Get a cat by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM cats WHERE id = ?", (cat_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_cat(row)

    async def list_all(self) -> list[Cat]:
        """List all cats in the order they were added."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM cats ORDER BY created_at, rowid")
            rows = await cursor.fetchall()
            return [self._row_to_cat(row) for row in rows]

    async def update(self, cat: Cat) -> None:
        """Update a cat's profile (name and photo)."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "UPDATE cats SET name = ?, photo = ? WHERE id = ?",
                (cat.name, cat.photo, cat.id),
            )
            await db.commit()
            if cursor.rowcount == 0:
                raise ValueError(f"Cat {cat.id} does not exist")
        logger.debug(f"Updated cat {cat.id}")

    async def delete(self, cat_id: str) -> None:
        """Delete a cat together with all its records and goal."""
        async with aiosqlite.connect(self.db_path) as db:
            for table in ("health_records", "weight_records", "weight_goals"):
                await db.execute(f"DELETE FROM {table} WHERE cat_id = ?", (cat_id,))
            await db.execute("DELETE FROM cats WHERE id = ?", (cat_id,))
            await db.execute(
                "DELETE FROM settings WHERE key = ? AND value = ?",
                (SettingsRepository.SELECTED_CAT_KEY, cat_id),
            )
            await db.commit()
        logger.debug(f"Deleted cat {cat_id} and its records")

    def _row_to_cat(self, row: aiosqlite.Row) -> Cat:
        """Convert a database row to a Cat."""
        return Cat(
            id=row["id"],
            name=row["name"],
            photo=row["photo"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )


class HealthRecordRepository:
    """Repository for daily health records."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def save(self, record: HealthRecord) -> None:
        """Store a record, replacing any record for the same cat and day."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "DELETE FROM health_records WHERE cat_id = ? AND date = ?",
                (record.cat_id, record.day_key),
            )
            await db.execute(
                """
                INSERT INTO health_records
                (cat_id, date, answers, score, percentage, status)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    record.cat_id,
                    record.day_key,
                    json.dumps(record.answers.to_dict()),
                    record.score,
                    record.percentage,
                    record.status.value,
                ),
            )
            await db.commit()
        logger.debug(
            f"Saved health record for cat {record.cat_id} on {record.day_key} "
            f"({record.percentage}%, {record.status.value})"
        )

    async def list_for_cat(self, cat_id: str) -> list[HealthRecord]:
        """All records for a cat, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM health_records WHERE cat_id = ? ORDER BY date DESC",
                (cat_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_record(row) for row in rows]

    async def get_for_date(self, cat_id: str, day: date) -> HealthRecord | None:
        """Get the record for a specific day."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM health_records WHERE cat_id = ? AND date = ?",
                (cat_id, day.isoformat()),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_record(row)

    async def get_today(self, cat_id: str, today: date | None = None) -> HealthRecord | None:
        """Get today's record, if the cat has been checked today."""
        return await self.get_for_date(cat_id, today or date.today())

    async def dates_for_cat(self, cat_id: str) -> list[date]:
        """Days with a record, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT date FROM health_records WHERE cat_id = ? ORDER BY date DESC",
                (cat_id,),
            )
            rows = await cursor.fetchall()
            return [date.fromisoformat(row[0]) for row in rows]

    def _row_to_record(self, row: aiosqlite.Row) -> HealthRecord:
        """Convert a database row to a HealthRecord."""
        return HealthRecord(
            cat_id=row["cat_id"],
            date=date.fromisoformat(row["date"]),
            answers=HealthAnswers.from_dict(json.loads(row["answers"])),
            score=row["score"],
            percentage=row["percentage"],
            status=HealthStatus(row["status"]),
        )


class WeightRecordRepository:
    """Repository for weight logs."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def save(self, record: WeightRecord) -> None:
        """Store a weight, replacing any weight for the same cat and day."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "DELETE FROM weight_records WHERE cat_id = ? AND date = ?",
                (record.cat_id, record.day_key),
            )
            await db.execute(
                "INSERT INTO weight_records (cat_id, date, weight, unit) VALUES (?, ?, ?, ?)",
                (record.cat_id, record.day_key, record.weight, record.unit.value),
            )
            await db.commit()
        logger.debug(
            f"Saved weight {record.weight} {record.unit.value} "
            f"for cat {record.cat_id} on {record.day_key}"
        )

    async def list_for_cat(self, cat_id: str) -> list[WeightRecord]:
        """All weights for a cat, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM weight_records WHERE cat_id = ? ORDER BY date DESC",
                (cat_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_record(row) for row in rows]

    async def get_latest(self, cat_id: str) -> WeightRecord | None:
        """Most recently dated weight for a cat."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM weight_records WHERE cat_id = ?
                ORDER BY date DESC LIMIT 1
                """,
                (cat_id,),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_record(row)

    async def delete(self, cat_id: str, day: date) -> bool:
        """Delete one day's weight. Returns False if there was none."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM weight_records WHERE cat_id = ? AND date = ?",
                (cat_id, day.isoformat()),
            )
            await db.commit()
            deleted = cursor.rowcount > 0
        if deleted:
            logger.debug(f"Deleted weight for cat {cat_id} on {day.isoformat()}")
        return deleted

    def _row_to_record(self, row: aiosqlite.Row) -> WeightRecord:
        """Convert a database row to a WeightRecord."""
        return WeightRecord(
            cat_id=row["cat_id"],
            date=date.fromisoformat(row["date"]),
            weight=row["weight"],
            unit=WeightUnit(row["unit"]),
        )


class WeightGoalRepository:
    """Repository for weight goals (one per cat)."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def set(self, goal: WeightGoal) -> None:
        """Set the cat's goal, discarding any previous one."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM weight_goals WHERE cat_id = ?", (goal.cat_id,))
            await db.execute(
                """
                INSERT INTO weight_goals (cat_id, min_weight, max_weight, unit)
                VALUES (?, ?, ?, ?)
                """,
                (goal.cat_id, goal.min_weight, goal.max_weight, goal.unit.value),
            )
            await db.commit()
        logger.debug(
            f"Set weight goal for cat {goal.cat_id}: "
            f"{goal.min_weight}-{goal.max_weight} {goal.unit.value}"
        )

    async def get(self, cat_id: str) -> WeightGoal | None:
        """Get the cat's goal, if set."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM weight_goals WHERE cat_id = ?", (cat_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return WeightGoal(
                cat_id=row["cat_id"],
                min_weight=row["min_weight"],
                max_weight=row["max_weight"],
                unit=WeightUnit(row["unit"]),
            )

    async def delete(self, cat_id: str) -> None:
        """Remove the cat's goal."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM weight_goals WHERE cat_id = ?", (cat_id,))
            await db.commit()
        logger.debug(f"Deleted weight goal for cat {cat_id}")


class SettingsRepository:
    """Key/value application settings."""

    PREFERRED_UNIT_KEY = "preferred_weight_unit"
    SELECTED_CAT_KEY = "selected_cat_id"

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, key: str) -> str | None:
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT value FROM settings WHERE key = ?", (key,))
            row = await cursor.fetchone()
            return row[0] if row else None

    async def set(self, key: str, value: str) -> None:
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO settings (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value),
            )
            await db.commit()

    async def delete(self, key: str) -> None:
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM settings WHERE key = ?", (key,))
            await db.commit()

    async def get_preferred_unit(self) -> WeightUnit:
        """Preferred display unit, kg unless set."""
        value = await self.get(self.PREFERRED_UNIT_KEY)
        return WeightUnit(value) if value else WeightUnit.KG

    async def set_preferred_unit(self, unit: WeightUnit | str) -> None:
        await self.set(self.PREFERRED_UNIT_KEY, WeightUnit(unit).value)

    async def get_selected_cat_id(self) -> str | None:
        return await self.get(self.SELECTED_CAT_KEY)

    async def set_selected_cat_id(self, cat_id: str) -> None:
        await self.set(self.SELECTED_CAT_KEY, cat_id)

    async def clear_selected_cat_id(self) -> None:
        await self.delete(self.SELECTED_CAT_KEY)
