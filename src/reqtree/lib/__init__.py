"""Shared library utilities for reqtree."""
