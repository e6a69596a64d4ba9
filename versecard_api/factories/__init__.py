"""
Factories for creating and wiring verse card services.
"""

from .service_factory import ServiceContainer, ServiceFactory

__all__ = ["ServiceContainer", "ServiceFactory"]
