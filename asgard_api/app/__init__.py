"""
Application package initializer.

The project is organised in layers.  ``domain`` holds the plain
records, ``repositories`` the storage ports and their adapters,
``services`` the per‑resource call surface used by the HTTP layer and
``api`` the versioned FastAPI routers.  ``core`` carries configuration,
logging and database bootstrap.
"""

from .main import app  # noqa: F401
