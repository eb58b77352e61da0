"""
Top‑level API router.

Aggregates the domain routers under their path prefixes.  The book
routes live under ``/bookapi``, the path the frontend is built
against.
"""

from fastapi import APIRouter

from .endpoints import books

router = APIRouter()

router.include_router(books.router, prefix="/bookapi", tags=["books"])
