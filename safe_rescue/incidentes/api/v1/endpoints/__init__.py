"""One router module per Incidentes resource."""
