"""Read-only join exercises over the movies / actors / castings schema."""
