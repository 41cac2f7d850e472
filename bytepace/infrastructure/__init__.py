"""Infrastructure layer - configuration loading."""
