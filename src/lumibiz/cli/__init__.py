"""Command-line interface for lumibiz."""
