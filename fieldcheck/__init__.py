"""fieldcheck: declarative constraint evaluation for record types."""

__version__ = "0.1.0"
