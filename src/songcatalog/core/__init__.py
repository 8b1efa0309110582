"""Core functionality for songcatalog."""
