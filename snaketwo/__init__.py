"""An arcade snake game with levels, a colour shop and achievements."""

__version__ = "1.0.0"