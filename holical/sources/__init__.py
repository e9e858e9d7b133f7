"""Built-in holiday sources, registered on import."""
