"""Console chess: a board, move rules, save files and a terminal game session."""

__version__ = "1.0.0"