"""
Domain endpoint modules.

Each module defines an ``APIRouter`` named ``router`` which is
mounted by ``api/router.py``.
"""
