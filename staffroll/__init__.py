"""Staff register of people, employees and programmers."""

__version__ = "0.1.0"
__all__ = ["common", "people", "cli"]