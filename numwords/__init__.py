"""Spell out non-negative whole numbers in words from a plain-text number dictionary."""

__version__ = "1.0.0"
__all__ = ["cli", "dictionary", "speller"]