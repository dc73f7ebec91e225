"""Command line interface for Hexapawn."""
