"""Dining philosophers simulation: argument parsing, the table and its monitor."""

__version__ = "1.0.0"