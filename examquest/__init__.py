"""A terminal role-playing game about surviving the last day of final exams."""

__version__ = "0.1.0"
__all__ = ["__version__"]