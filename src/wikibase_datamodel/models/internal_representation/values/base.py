from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel, ConfigDict

from wikibase_datamodel.exceptions import UnsupportedVariant

if TYPE_CHECKING:
    from ..visitors import ValueVisitor

R = TypeVar("R")


class Value(BaseModel):
    """Root of the closed value hierarchy.

    Concrete variants override accept() to call back the matching visit
    method. A subclass that does not is outside the closed set and fails.
    """

    model_config = ConfigDict(frozen=True)

    def accept(self, visitor: "ValueVisitor[R]") -> R:
        raise UnsupportedVariant(
            type(self), f"No visitor dispatch for value type {type(self).__name__}"
        )
