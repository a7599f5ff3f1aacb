"""Path use cases operating on raw strings."""
