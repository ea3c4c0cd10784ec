"""
Perfiles service.

Owns people and the rescue organisation: users with their citizen and
firefighter subtypes, user and team types, companies, teams, the
audit trail of state changes, and login/registration.
"""
