"""Command-line entry point and its composition root."""
