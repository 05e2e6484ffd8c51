"""Pytest configuration for CLI integration tests."""

import pytest
from click.testing import CliRunner

from cat_health.cli import main


def pytest_collection_modifyitems(items):
    """Mark every test in this directory as an integration test."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def runner(tmp_path, monkeypatch):
    """CLI runner bound to a throwaway data directory."""
    monkeypatch.setenv("CAT_HEALTH_DATA_DIR", str(tmp_path / "data"))
    return CliRunner()


@pytest.fixture
def initialized(runner):
    result = runner.invoke(main, ["init"])
    assert result.exit_code == 0, result.output
    return runner


@pytest.fixture
def with_cat(initialized):
    """Initialized project with one selected cat named Mochi."""
    result = initialized.invoke(main, ["cats", "add", "Mochi"])
    assert result.exit_code == 0, result.output
    return initialized
