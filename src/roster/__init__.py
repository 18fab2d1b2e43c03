"""Roster - relational user and role administration."""

__version__ = "0.1.0"
