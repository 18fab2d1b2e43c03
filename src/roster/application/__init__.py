"""Application layer: commands, queries, DTOs and ports."""
