"""Application layer: commands, queries and services."""
