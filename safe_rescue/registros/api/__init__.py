"""HTTP layer of the Registros service."""
