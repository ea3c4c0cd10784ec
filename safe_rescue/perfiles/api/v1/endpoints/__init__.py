"""One router module per Perfiles resource."""
