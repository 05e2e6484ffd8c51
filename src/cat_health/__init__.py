"""cat-health: daily wellness scoring and weight tracking for cats."""

__version__ = "0.1.0"
