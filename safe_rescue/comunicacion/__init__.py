"""
Comunicación service.

Conversations between users, their participants and messages, user
notifications and the history of message and notification states.
"""
