"""CLI commands for Genie Docker."""
