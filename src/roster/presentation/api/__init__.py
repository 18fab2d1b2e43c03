"""FastAPI adapter for the roster application."""
