from .base import EntityDocument
from .item import ItemDocument
from .property import PropertyDocument
from .lexeme import LexemeDocument, FormDocument, SenseDocument
from .media_info import MediaInfoDocument

__all__ = [
    "EntityDocument",
    "ItemDocument",
    "PropertyDocument",
    "LexemeDocument",
    "FormDocument",
    "SenseDocument",
    "MediaInfoDocument",
]
