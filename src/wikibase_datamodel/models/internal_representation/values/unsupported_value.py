from typing import Any, TypeVar

from pydantic import Field
from typing_extensions import Literal

from ..value_kinds import ValueKind
from ..visitors import ValueVisitor
from .base import Value

R = TypeVar("R")


class UnsupportedValue(Value):
    """Value of a type unknown to the model, carried around as an opaque blob.

    The contents are never inspected, so copies of it are the instance itself.
    """

    kind: Literal[ValueKind.UNSUPPORTED] = Field(default=ValueKind.UNSUPPORTED, frozen=True)
    value_type: str
    contents: Any = None

    def __hash__(self) -> int:
        # contents may be unhashable; equal values still share a value type
        return hash((type(self), self.value_type))

    def accept(self, visitor: ValueVisitor[R]) -> R:
        return visitor.visit_unsupported_value(self)
