"""Service layer of the Perfiles service."""
