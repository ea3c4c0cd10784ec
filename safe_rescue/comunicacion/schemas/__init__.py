"""Request and response models of the Comunicación service."""
