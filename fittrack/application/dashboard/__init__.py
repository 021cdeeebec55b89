"""Dashboard read models for the home and progress screens."""
