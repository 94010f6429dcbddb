"""Command-line entry points for running the draftmcp services."""
