"""Infrastructure layer: persistence implementations of application ports."""
