from decimal import Decimal, InvalidOperation
from typing import Any, Optional, TypeVar

from pydantic import Field, field_validator, model_validator
from typing_extensions import Literal

from ..value_kinds import ValueKind
from ..visitors import ValueVisitor
from .base import Value
from .entity_id_value import ItemIdValue

R = TypeVar("R")


class QuantityValue(Value):
    """Decimal amount with optional uncertainty bounds and unit.

    Decimals are kept as given, so 5.0 keeps its trailing zero.
    """

    kind: Literal[ValueKind.QUANTITY] = Field(default=ValueKind.QUANTITY, frozen=True)
    numeric_value: Decimal
    lower_bound: Optional[Decimal] = None
    upper_bound: Optional[Decimal] = None
    unit: Optional[ItemIdValue] = None

    @field_validator("numeric_value", "lower_bound", "upper_bound", mode="before")
    @classmethod
    def validate_numeric(cls, v: Any) -> Any:
        if v is None or isinstance(v, Decimal):
            return v
        if isinstance(v, bool):
            raise ValueError(f"Value must be a valid number, got: {v}")
        try:
            return Decimal(repr(v) if isinstance(v, float) else str(v))
        except InvalidOperation:
            raise ValueError(f"Value must be a valid number, got: {v}")

    @model_validator(mode="after")
    def validate_bounds(self) -> "QuantityValue":
        if (self.lower_bound is None) != (self.upper_bound is None):
            raise ValueError("Quantity bounds must be given together or not at all")
        if self.lower_bound is not None and self.upper_bound is not None:
            if self.lower_bound > self.numeric_value:
                raise ValueError("Lower bound cannot be greater than amount")
            if self.upper_bound < self.numeric_value:
                raise ValueError("Upper bound cannot be less than amount")
        return self

    def accept(self, visitor: ValueVisitor[R]) -> R:
        return visitor.visit_quantity_value(self)
