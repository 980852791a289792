"""Find the previous Japanese business day."""

__version__ = "0.1.0"
