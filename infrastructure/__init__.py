"""Infrastructure layer: configuration, logging and persistence adapters."""
