"""Infrastructure adapters - concrete implementations of application ports."""
