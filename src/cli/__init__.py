"""Command line interface for mddkit."""
