"""Fitlog - personal workout log with summary statistics."""

__version__ = "1.0.0"
