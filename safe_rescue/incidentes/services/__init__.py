"""Business logic of the Incidentes service."""
