from typing import TypeVar

from pydantic import Field, field_validator
from typing_extensions import Literal

from ..value_kinds import ValueKind
from ..visitors import ValueVisitor
from ..vocab import Vocab
from .base import Value

R = TypeVar("R")


class GlobeCoordinatesValue(Value):
    kind: Literal[ValueKind.GLOBE] = Field(default=ValueKind.GLOBE, frozen=True)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-360, le=360)
    precision: float = Field(default=1 / 3600, gt=0)
    globe_iri: str = Vocab.GLOBE_EARTH

    @field_validator("globe_iri")
    @classmethod
    def validate_globe(cls, v: str) -> str:
        if not v:
            raise ValueError("Globe IRI must not be empty")
        return v

    def accept(self, visitor: ValueVisitor[R]) -> R:
        return visitor.visit_globe_coordinates_value(self)
