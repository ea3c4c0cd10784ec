"""HTTP layer of the Comunicación service."""
