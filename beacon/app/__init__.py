"""Application wiring for the project type dialog."""
