"""
Pydantic schema definitions for API payloads and stored records.

Each entity defines a ``*Payload`` model for request bodies and a
record model that is both persisted (as JSON) and returned by the API.
"""
