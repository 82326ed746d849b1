from .builders import (
    ItemDocumentBuilder,
    PropertyDocumentBuilder,
    ReferenceBuilder,
    StatementBuilder,
)
from .converter import DatamodelConverter
from .datamodel import Datamodel

__all__ = [
    "Datamodel",
    "DatamodelConverter",
    "ItemDocumentBuilder",
    "PropertyDocumentBuilder",
    "ReferenceBuilder",
    "StatementBuilder",
]
