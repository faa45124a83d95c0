"""Resume template binding suggestion service."""

__version__ = "0.1.0"
