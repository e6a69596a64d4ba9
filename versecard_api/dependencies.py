"""
FastAPI dependencies shared by the routers.

The service container is built lazily on first use. Tests replace it via
``app.dependency_overrides[get_container]``.
"""

from threading import Lock
from typing import Optional

from .factories import ServiceContainer, ServiceFactory

_container: Optional[ServiceContainer] = None
_container_lock = Lock()


def get_container() -> ServiceContainer:
    """Return the process-wide service container."""
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                _container = ServiceFactory().create_container()
    return _container
