from enum import Enum


class ValueKind(str, Enum):
    ENTITY = "entity"
    STRING = "string"
    TIME = "time"
    QUANTITY = "quantity"
    GLOBE = "globe"
    MONOLINGUAL = "monolingual"
    UNSUPPORTED = "unsupported"


class SnakType(str, Enum):
    VALUE = "value"
    SOMEVALUE = "somevalue"
    NOVALUE = "novalue"
