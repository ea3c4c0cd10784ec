"""
Geolocalización service.

Owns countries, regions, communes, coordinates and street addresses.
Perfiles and Incidentes call it to check and create addresses.
"""
