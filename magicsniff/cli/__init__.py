"""Command line presentation helpers for magicsniff."""
