"""Command-line interface for Roster."""
