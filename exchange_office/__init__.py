"""Exchange office portal service."""

__version__ = "1.0.0"
