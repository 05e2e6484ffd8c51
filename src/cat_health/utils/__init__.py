"""Utility functions for cat-health."""

from .units import KG_TO_LBS, convert_weight, round_half_up

__all__ = ["KG_TO_LBS", "convert_weight", "round_half_up"]
