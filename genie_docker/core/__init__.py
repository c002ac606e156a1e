"""Core functionality for Genie Docker."""
