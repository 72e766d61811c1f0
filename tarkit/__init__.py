"""Building blocks of a per-user package manager for archive-distributed software."""

__version__ = "0.1.0"