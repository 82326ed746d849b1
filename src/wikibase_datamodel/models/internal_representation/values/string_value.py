from typing import TypeVar

from pydantic import Field
from typing_extensions import Literal

from ..value_kinds import ValueKind
from ..visitors import ValueVisitor
from .base import Value

R = TypeVar("R")


class StringValue(Value):
    kind: Literal[ValueKind.STRING] = Field(default=ValueKind.STRING, frozen=True)
    text: str

    def accept(self, visitor: ValueVisitor[R]) -> R:
        return visitor.visit_string_value(self)
