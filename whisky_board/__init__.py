"""Whisky tasting board: published CSV -> typed records -> filtered, sorted and ranked views."""

__version__ = "0.1.0"
