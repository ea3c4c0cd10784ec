"""
Shared infrastructure for all SAFE-Rescue services.

Settings, logging setup, SQLite connections and migrations, the
exception hierarchy and its HTTP mapping, security helpers and the
generic CRUD repository live here so that every service builds on the
same primitives.
"""
