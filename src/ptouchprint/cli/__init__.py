"""Command line tools for ptouchprint."""
