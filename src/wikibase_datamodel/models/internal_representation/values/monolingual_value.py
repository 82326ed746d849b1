from typing import TypeVar

from pydantic import Field, field_validator
from typing_extensions import Literal

from ..value_kinds import ValueKind
from ..visitors import ValueVisitor
from .base import Value

R = TypeVar("R")


class MonolingualTextValue(Value):
    kind: Literal[ValueKind.MONOLINGUAL] = Field(default=ValueKind.MONOLINGUAL, frozen=True)
    text: str
    language_code: str

    @field_validator("language_code")
    @classmethod
    def validate_language_code(cls, v: str) -> str:
        if not v:
            raise ValueError("MonolingualText language code must not be empty")
        return v

    def accept(self, visitor: ValueVisitor[R]) -> R:
        return visitor.visit_monolingual_text_value(self)
