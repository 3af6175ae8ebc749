"""Shorthand alias generator for kubectl.

The command surface is implemented with Typer and Rich for better help and
error ergonomics, while the generated alias lines stay plain shell text.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
