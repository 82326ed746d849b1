from .vocab import Vocab
from .ranks import Rank
from .entity_types import EntityKind
from .value_kinds import SnakType, ValueKind
from .visitors import SnakVisitor, ValueVisitor
from .values import (
    Value,
    EntityIdValue,
    ItemIdValue,
    PropertyIdValue,
    LexemeIdValue,
    FormIdValue,
    SenseIdValue,
    MediaInfoIdValue,
    DatatypeIdValue,
    StringValue,
    MonolingualTextValue,
    TimePrecision,
    TimeValue,
    GlobeCoordinatesValue,
    QuantityValue,
    UnsupportedValue,
)
from .snaks import Snak, ValueSnak, SomeValueSnak, NoValueSnak, SnakGroup
from .claims import Claim
from .references import Reference
from .statements import Statement, StatementGroup
from .sitelinks import SiteLink
from .documents import (
    EntityDocument,
    ItemDocument,
    PropertyDocument,
    LexemeDocument,
    FormDocument,
    SenseDocument,
    MediaInfoDocument,
)

__all__ = [
    "Vocab",
    "Rank",
    "EntityKind",
    "SnakType",
    "ValueKind",
    "SnakVisitor",
    "ValueVisitor",
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
    "Snak",
    "ValueSnak",
    "SomeValueSnak",
    "NoValueSnak",
    "SnakGroup",
    "Claim",
    "Reference",
    "Statement",
    "StatementGroup",
    "SiteLink",
    "EntityDocument",
    "ItemDocument",
    "PropertyDocument",
    "LexemeDocument",
    "FormDocument",
    "SenseDocument",
    "MediaInfoDocument",
]
