"""Command line interface for depscope."""
