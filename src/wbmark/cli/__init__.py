"""Command line interface for wbmark."""
