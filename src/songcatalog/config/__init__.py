"""Configuration helpers for songcatalog."""
