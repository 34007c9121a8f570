"""Integration tests exercising the Flask request cycle."""
