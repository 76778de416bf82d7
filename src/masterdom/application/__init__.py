"""Application layer: commands, queries, services and read ports."""
