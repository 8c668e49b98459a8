"""Doctors Portal appointment-booking backend."""

__version__ = "0.1.0"
