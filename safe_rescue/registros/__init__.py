"""
Registros service.

Owns the shared lookup tables (categorias, estados), the generic
historial log and photo storage.  The ``estados`` table is the state
catalogue every other service validates against.
"""
