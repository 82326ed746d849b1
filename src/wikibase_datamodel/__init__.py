"""Immutable Wikibase data model with a factory-generic converter."""

from .exceptions import DatamodelError, UnsupportedVariant, ValidationError
from .models.factory import DataObjectFactory, ObjectFactory
from .models.helpers import (
    Datamodel,
    DatamodelConverter,
    ItemDocumentBuilder,
    PropertyDocumentBuilder,
    ReferenceBuilder,
    StatementBuilder,
)
from .models.internal_representation import Vocab

__version__ = "0.1.0"

__all__ = [
    "DatamodelError",
    "UnsupportedVariant",
    "ValidationError",
    "DataObjectFactory",
    "ObjectFactory",
    "Datamodel",
    "DatamodelConverter",
    "ItemDocumentBuilder",
    "PropertyDocumentBuilder",
    "ReferenceBuilder",
    "StatementBuilder",
    "Vocab",
]
