from .base import DataObjectFactory
from .object_factory import ObjectFactory

__all__ = ["DataObjectFactory", "ObjectFactory"]
