"""Service layer of the Registros service."""
