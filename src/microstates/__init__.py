"""Enumeration of d^n electronic microstates (ML, MS bookkeeping)."""

__version__ = "0.1.0"
