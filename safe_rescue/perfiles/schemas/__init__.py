"""Request and response models of the Perfiles service."""
