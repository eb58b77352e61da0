"""
Application package initializer.

The project is organised into small layers: ``core`` (configuration,
logging, database access), ``schemas`` (pydantic request and
response models), ``repositories`` (SQL for each table),
``services`` (operations used by the HTTP handlers) and ``api``
(FastAPI routers).
"""

from .main import app  # noqa: F401
