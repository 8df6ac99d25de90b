"""Wordle assistant: candidate elimination and entropy-driven guess selection."""

__version__ = "0.1.0"
