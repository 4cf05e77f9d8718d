"""Yesterday / today / tomorrow weather core."""

__version__ = "0.1.0"
