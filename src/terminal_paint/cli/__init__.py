"""Command line interface and interactive painter."""
