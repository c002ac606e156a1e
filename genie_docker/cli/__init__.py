"""Command line interface for Genie Docker."""
