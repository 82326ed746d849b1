from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing_extensions import Literal

from wikibase_datamodel.exceptions import UnsupportedVariant

from .value_kinds import SnakType
from .values import PropertyIdValue, Value
from .visitors import SnakVisitor

R = TypeVar("R")


class Snak(BaseModel):
    """Root of the closed snak hierarchy: value, some value and no value."""

    property_id: PropertyIdValue

    model_config = ConfigDict(frozen=True)

    def accept(self, visitor: SnakVisitor[R]) -> R:
        raise UnsupportedVariant(
            type(self), f"No visitor dispatch for snak type {type(self).__name__}"
        )


class ValueSnak(Snak):
    snak_type: Literal[SnakType.VALUE] = Field(default=SnakType.VALUE, frozen=True)
    value: Value

    def accept(self, visitor: SnakVisitor[R]) -> R:
        return visitor.visit_value_snak(self)


class SomeValueSnak(Snak):
    snak_type: Literal[SnakType.SOMEVALUE] = Field(default=SnakType.SOMEVALUE, frozen=True)

    def accept(self, visitor: SnakVisitor[R]) -> R:
        return visitor.visit_some_value_snak(self)


class NoValueSnak(Snak):
    snak_type: Literal[SnakType.NOVALUE] = Field(default=SnakType.NOVALUE, frozen=True)

    def accept(self, visitor: SnakVisitor[R]) -> R:
        return visitor.visit_no_value_snak(self)


class SnakGroup(BaseModel):
    """Non-empty run of snaks that share one property."""

    snaks: tuple[Snak, ...]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_snaks(self) -> "SnakGroup":
        if not self.snaks:
            raise ValueError("Snak group must not be empty")
        property_id = self.snaks[0].property_id
        for snak in self.snaks[1:]:
            if snak.property_id != property_id:
                raise ValueError(
                    f"All snaks in a group must use the same property, "
                    f"got {property_id.id} and {snak.property_id.id}"
                )
        return self

    @property
    def property_id(self) -> PropertyIdValue:
        return self.snaks[0].property_id

    def __len__(self) -> int:
        return len(self.snaks)
