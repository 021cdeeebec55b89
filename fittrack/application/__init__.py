"""Application layer: dashboard queries and persistence synchronisation."""
