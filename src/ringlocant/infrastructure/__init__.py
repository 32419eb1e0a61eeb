"""Infrastructure layer: adapters for external libraries."""
