"""HTTP layer of the Geolocalización service."""
