"""utilkit — small utility toolkit with a Click CLI."""

__version__ = "0.1.0"
