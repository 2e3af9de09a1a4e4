"""Domain layer: contact model and birthday projection."""
