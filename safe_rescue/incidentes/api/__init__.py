"""HTTP layer of the Incidentes service."""
