"""Solar plant output simulation in a one-dimensional sun model."""

__version__ = "0.1.0"
