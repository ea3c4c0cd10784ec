"""Request and response models of the Incidentes service."""
