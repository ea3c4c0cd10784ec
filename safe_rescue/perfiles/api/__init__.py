"""HTTP layer of the Perfiles service."""
