"""Routing algorithms."""
