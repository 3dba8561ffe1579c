"""Output layer — render ServiceResult for terminals, pipes, and machines."""
