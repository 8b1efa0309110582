"""Command line interface for songcatalog."""
