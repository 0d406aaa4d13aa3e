"""Doctors Portal: REST backend for clinic appointment booking."""

__version__ = "1.0.0"
