"""CLI commands for cat-health."""

from .cats import cats
from .check import check, tips
from .export import export
from .history import history, streak
from .init import init
from .weight import unit, weight

__all__ = [
    "cats",
    "check",
    "export",
    "history",
    "init",
    "streak",
    "tips",
    "unit",
    "weight",
]
