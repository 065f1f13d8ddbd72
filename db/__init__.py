"""
db/ - Database Layer
====================
Owns the single PostgreSQL connection, schema initialization, and the
update/query primitives every repository goes through.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
