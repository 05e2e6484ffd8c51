"""Database engine setup and initialization."""

from pathlib import Path

import aiosqlite
from loguru import logger

from ..config import Settings


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path, creating its directory if needed."""
    settings = Settings.from_env()
    if data_dir is not None:
        settings.data_dir = data_dir
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return settings.db_path


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS cats (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                photo TEXT,
                created_at TIMESTAMP NOT NULL
            )
        """)

        # One record per cat per day
        await db.execute("""
            CREATE TABLE IF NOT EXISTS health_records (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                cat_id TEXT NOT NULL,
                date TEXT NOT NULL,
                answers TEXT NOT NULL,
                score INTEGER NOT NULL,
                percentage INTEGER NOT NULL,
                status TEXT NOT NULL,
                UNIQUE (cat_id, date),
                FOREIGN KEY (cat_id) REFERENCES cats(id) ON DELETE CASCADE
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS weight_records (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                cat_id TEXT NOT NULL,
                date TEXT NOT NULL,
                weight REAL NOT NULL,
                unit TEXT NOT NULL DEFAULT 'kg',
                UNIQUE (cat_id, date),
                FOREIGN KEY (cat_id) REFERENCES cats(id) ON DELETE CASCADE
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS weight_goals (
                cat_id TEXT PRIMARY KEY,
                min_weight REAL NOT NULL,
                max_weight REAL NOT NULL,
                unit TEXT NOT NULL DEFAULT 'kg',
                FOREIGN KEY (cat_id) REFERENCES cats(id) ON DELETE CASCADE
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS settings (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_health_records_cat
            ON health_records(cat_id, date)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_weight_records_cat
            ON weight_records(cat_id, date)
        """)

        await db.commit()

    logger.debug(f"Database schema ready at {db_path}")
