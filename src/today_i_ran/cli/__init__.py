"""Command line interface for Today I Ran."""
