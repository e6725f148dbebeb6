"""Click commands for the reqtree CLI."""
