"""Command-line interface for humanize-url."""
