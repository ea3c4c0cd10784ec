"""
Incidentes service.

Emergency incidents reported by citizens, their types and the history
of every change made to them while they are attended.
"""
