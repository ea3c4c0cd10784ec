"""One router module per Registros resource."""
