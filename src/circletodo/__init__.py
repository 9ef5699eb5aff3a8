"""circletodo - a to-do list of colored circles for the terminal."""

__version__ = "0.1.0"
