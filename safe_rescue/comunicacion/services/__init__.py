"""Business logic of the Comunicación service."""
