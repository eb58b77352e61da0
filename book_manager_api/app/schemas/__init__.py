"""
Pydantic schema definitions for API payloads.

Schemas are separated from database access so that the API
representation stays decoupled from persistence.
"""
