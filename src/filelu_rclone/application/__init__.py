"""Application layer — use cases orchestrating domain objects through ports."""
