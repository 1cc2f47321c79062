"""Timer adapters for the scheduler port."""
