"""
db/ - Database Layer
====================
Owns the PostgreSQL connections: the command connection used for
procedure calls and the separate listener connection for notifications.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
