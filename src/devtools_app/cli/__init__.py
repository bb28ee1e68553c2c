"""Command-line interface for devtools-app."""
