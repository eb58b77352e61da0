"""
Top‑level package for the Book Manager API.

This file makes ``book_manager_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``book_manager_api.app.main``.
"""
