"""One router module per Comunicación resource."""
