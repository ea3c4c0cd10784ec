"""Service layer of the Geolocalización service."""
