"""Request and response models of the Geolocalización service."""
