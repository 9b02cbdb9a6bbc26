"""Infrastructure adapters for domain interfaces."""
