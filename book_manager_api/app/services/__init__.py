"""
Service layer abstraction.

Each service exposes the operations the API handlers call for one
domain and delegates storage to the matching repository.
"""
