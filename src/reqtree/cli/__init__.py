"""Command line interface for reqtree."""
