"""Parsing, unit conversion and calculations shared by the CLI."""
