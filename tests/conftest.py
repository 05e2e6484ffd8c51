"""Pytest configuration and fixtures."""

import tempfile
from datetime import date
from pathlib import Path

import pytest

from cat_health.models.cat import Cat
from cat_health.models.health import HealthAnswers


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def healthy_answers():
    """Answers that score a perfect 10 in every category."""
    return HealthAnswers(
        eating="2-3",
        water="normal",
        pee="2-4",
        poop="normal",
        activity="very-active",
        mood="playful",
        vomiting="no",
        appetite="normal",
    )


@pytest.fixture
def worst_answers():
    """The lowest-scoring answer in every category."""
    return HealthAnswers(
        eating="0",
        water="very-little",
        pee="0-1",
        poop="diarrhea",
        activity="hiding",
        mood="depressed",
        vomiting="more-than-once",
        appetite="refusing-food",
    )


@pytest.fixture
def sample_cat():
    return Cat(name="Mochi")


@pytest.fixture
def day():
    return date(2024, 1, 15)
