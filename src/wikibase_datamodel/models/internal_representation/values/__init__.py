from .base import Value
from .entity_id_value import (
    EntityIdValue,
    ItemIdValue,
    PropertyIdValue,
    LexemeIdValue,
    FormIdValue,
    SenseIdValue,
    MediaInfoIdValue,
)
from .datatype_id_value import DatatypeIdValue
from .string_value import StringValue
from .monolingual_value import MonolingualTextValue
from .time_value import TimePrecision, TimeValue
from .globe_value import GlobeCoordinatesValue
from .quantity_value import QuantityValue
from .unsupported_value import UnsupportedValue

__all__ = [
    "Value",
    "EntityIdValue",
    "ItemIdValue",
    "PropertyIdValue",
    "LexemeIdValue",
    "FormIdValue",
    "SenseIdValue",
    "MediaInfoIdValue",
    "DatatypeIdValue",
    "StringValue",
    "MonolingualTextValue",
    "TimePrecision",
    "TimeValue",
    "GlobeCoordinatesValue",
    "QuantityValue",
    "UnsupportedValue",
]
