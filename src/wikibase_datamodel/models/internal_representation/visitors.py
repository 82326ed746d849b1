"""Double-dispatch contracts over the closed Value and Snak variant sets.

A visitor must implement one method per variant; abstract methods make an
incomplete visitor impossible to instantiate.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .snaks import NoValueSnak, SomeValueSnak, ValueSnak
    from .values import (
        EntityIdValue,
        GlobeCoordinatesValue,
        MonolingualTextValue,
        QuantityValue,
        StringValue,
        TimeValue,
        UnsupportedValue,
    )

R = TypeVar("R")


class ValueVisitor(ABC, Generic[R]):
    @abstractmethod
    def visit_entity_id_value(self, value: "EntityIdValue") -> R: ...

    @abstractmethod
    def visit_globe_coordinates_value(self, value: "GlobeCoordinatesValue") -> R: ...

    @abstractmethod
    def visit_monolingual_text_value(self, value: "MonolingualTextValue") -> R: ...

    @abstractmethod
    def visit_quantity_value(self, value: "QuantityValue") -> R: ...

    @abstractmethod
    def visit_string_value(self, value: "StringValue") -> R: ...

    @abstractmethod
    def visit_time_value(self, value: "TimeValue") -> R: ...

    @abstractmethod
    def visit_unsupported_value(self, value: "UnsupportedValue") -> R: ...


class SnakVisitor(ABC, Generic[R]):
    @abstractmethod
    def visit_value_snak(self, snak: "ValueSnak") -> R: ...

    @abstractmethod
    def visit_some_value_snak(self, snak: "SomeValueSnak") -> R: ...

    @abstractmethod
    def visit_no_value_snak(self, snak: "NoValueSnak") -> R: ...
