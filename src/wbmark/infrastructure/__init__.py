"""Infrastructure layer: parsing primitives, configuration, logging, resources."""
