from enum import Enum


class EntityKind(str, Enum):
    ITEM = "item"
    PROPERTY = "property"
    LEXEME = "lexeme"
    FORM = "form"
    SENSE = "sense"
    MEDIA_INFO = "mediainfo"
