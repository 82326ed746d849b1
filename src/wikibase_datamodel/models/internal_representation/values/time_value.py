from enum import IntEnum
from typing import TypeVar

from pydantic import Field, field_validator
from typing_extensions import Literal

from ..value_kinds import ValueKind
from ..visitors import ValueVisitor
from ..vocab import Vocab
from .base import Value

R = TypeVar("R")


class TimePrecision(IntEnum):
    GIGA_YEAR = 0
    HUNDRED_MEGA_YEARS = 1
    TEN_MEGA_YEARS = 2
    MEGA_YEAR = 3
    HUNDRED_KILO_YEARS = 4
    TEN_KILO_YEARS = 5
    MILLENNIUM = 6
    CENTURY = 7
    DECADE = 8
    YEAR = 9
    MONTH = 10
    DAY = 11
    HOUR = 12
    MINUTE = 13
    SECOND = 14


class TimeValue(Value):
    """Point in time with precision, tolerances and preferred calendar model.

    Year 0 is 1 BCE. Fields finer than the precision are conventionally
    zero, so month and day accept 0.
    """

    kind: Literal[ValueKind.TIME] = Field(default=ValueKind.TIME, frozen=True)
    year: int
    month: int = Field(ge=0, le=12)
    day: int = Field(ge=0, le=31)
    hour: int = Field(default=0, ge=0, le=23)
    minute: int = Field(default=0, ge=0, le=59)
    second: int = Field(default=0, ge=0, le=60)
    precision: TimePrecision = TimePrecision.DAY
    before_tolerance: int = Field(default=0, ge=0)
    after_tolerance: int = Field(default=0, ge=0)
    timezone_offset: int = Field(default=0, ge=-840, le=840)
    calendar_model: str = Vocab.CM_GREGORIAN_PRO

    @field_validator("calendar_model")
    @classmethod
    def validate_calendar_model(cls, v: str) -> str:
        if not v:
            raise ValueError("Calendar model IRI must not be empty")
        return v

    def accept(self, visitor: ValueVisitor[R]) -> R:
        return visitor.visit_time_value(self)
