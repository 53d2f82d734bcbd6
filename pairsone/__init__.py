"""Pairs game session server."""
