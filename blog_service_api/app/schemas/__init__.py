"""
Pydantic schema definitions for API payloads.

Schemas describe both the stored blog record and the request bodies
accepted by the API.  They are separated from the SQLite row layout
so that the API representation does not depend on persistence.
"""
