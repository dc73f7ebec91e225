"""Hexapawn CLI commands."""
