"""Request and response models of the Registros service."""
