"""Command-line interface for treegen."""
