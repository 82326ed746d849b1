import re
from typing import ClassVar, Optional, TypeVar

from pydantic import Field, model_validator
from typing_extensions import Literal

from ..entity_types import EntityKind
from ..value_kinds import ValueKind
from ..visitors import ValueVisitor
from .base import Value

R = TypeVar("R")


class EntityIdValue(Value):
    """Typed reference to an entity on a given site.

    Two ids are equal when they are of the same kind, have the same id
    string and the same site IRI.
    """

    kind: Literal[ValueKind.ENTITY] = Field(default=ValueKind.ENTITY, frozen=True)
    id: str
    site_iri: str

    entity_type: ClassVar[Optional[EntityKind]] = None
    id_pattern: ClassVar[Optional[re.Pattern]] = None

    @model_validator(mode="after")
    def validate_id(self) -> "EntityIdValue":
        pattern = type(self).id_pattern
        if pattern is not None and not pattern.match(self.id):
            raise ValueError(
                f"Malformed {type(self).__name__} identifier: {self.id!r}"
            )
        if not self.site_iri:
            raise ValueError("Entity id site IRI must not be empty")
        return self

    @property
    def iri(self) -> str:
        return self.site_iri + self.id

    @property
    def numeric_id(self) -> int:
        """Numeric part of the id; for forms and senses, the number within the lexeme."""
        return int(self.id.rsplit("-", 1)[-1][1:])

    def accept(self, visitor: ValueVisitor[R]) -> R:
        return visitor.visit_entity_id_value(self)

    def __str__(self) -> str:
        return self.iri


class ItemIdValue(EntityIdValue):
    entity_type: ClassVar[EntityKind] = EntityKind.ITEM
    id_pattern: ClassVar[re.Pattern] = re.compile(r"^Q[1-9][0-9]*$")


class PropertyIdValue(EntityIdValue):
    entity_type: ClassVar[EntityKind] = EntityKind.PROPERTY
    id_pattern: ClassVar[re.Pattern] = re.compile(r"^P[1-9][0-9]*$")


class LexemeIdValue(EntityIdValue):
    entity_type: ClassVar[EntityKind] = EntityKind.LEXEME
    id_pattern: ClassVar[re.Pattern] = re.compile(r"^L[1-9][0-9]*$")


class FormIdValue(EntityIdValue):
    entity_type: ClassVar[EntityKind] = EntityKind.FORM
    id_pattern: ClassVar[re.Pattern] = re.compile(r"^L[1-9][0-9]*-F[1-9][0-9]*$")

    @property
    def lexeme_id(self) -> LexemeIdValue:
        return LexemeIdValue(id=self.id.split("-")[0], site_iri=self.site_iri)


class SenseIdValue(EntityIdValue):
    entity_type: ClassVar[EntityKind] = EntityKind.SENSE
    id_pattern: ClassVar[re.Pattern] = re.compile(r"^L[1-9][0-9]*-S[1-9][0-9]*$")

    @property
    def lexeme_id(self) -> LexemeIdValue:
        return LexemeIdValue(id=self.id.split("-")[0], site_iri=self.site_iri)


class MediaInfoIdValue(EntityIdValue):
    entity_type: ClassVar[EntityKind] = EntityKind.MEDIA_INFO
    id_pattern: ClassVar[re.Pattern] = re.compile(r"^M[1-9][0-9]*$")
