"""Command-line interface for the Set game engine."""
