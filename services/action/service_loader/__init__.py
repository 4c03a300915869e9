"""Service Loader native package exports."""

from services.action.service_loader.component import COMPONENT_ID
from services.action.service_loader.implementation import CachingServiceLoader
from services.action.service_loader.service import ServiceLoader

__all__ = ["COMPONENT_ID", "CachingServiceLoader", "ServiceLoader"]
