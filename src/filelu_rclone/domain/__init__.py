"""Domain layer — models, ports and rendering rules with no framework dependencies."""
