"""Solvers for daily puzzles: safe dials, repeated product IDs and battery joltage."""

__version__ = "0.1.0"
__all__ = ["dial", "inputs", "invalid_ids", "jolts"]