"""One router module per Geolocalización entity."""
