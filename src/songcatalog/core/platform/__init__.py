"""Streaming platform integrations."""
