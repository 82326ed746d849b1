from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .claims import Claim
from .ranks import Rank
from .references import Reference
from .snaks import Snak, SnakGroup, ValueSnak
from .values import EntityIdValue, PropertyIdValue, Value


class Statement(BaseModel):
    """A claim together with its references, rank and statement id.

    The statement id is empty for statements that have not been saved yet.
    """

    subject: EntityIdValue
    main_snak: Snak
    qualifiers: tuple[SnakGroup, ...] = ()
    references: tuple[Reference, ...] = ()
    rank: Rank = Rank.NORMAL
    statement_id: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def claim(self) -> Claim:
        return Claim(
            subject=self.subject,
            main_snak=self.main_snak,
            qualifiers=self.qualifiers,
        )

    @property
    def property_id(self) -> PropertyIdValue:
        return self.main_snak.property_id

    @property
    def value(self) -> Optional[Value]:
        if isinstance(self.main_snak, ValueSnak):
            return self.main_snak.value
        return None


class StatementGroup(BaseModel):
    """Non-empty run of statements with one subject and one main property."""

    statements: tuple[Statement, ...]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_statements(self) -> "StatementGroup":
        if not self.statements:
            raise ValueError("Statement group must not be empty")
        first = self.statements[0]
        for statement in self.statements[1:]:
            if statement.subject != first.subject:
                raise ValueError(
                    f"All statements in a group must have the same subject, "
                    f"got {first.subject.id} and {statement.subject.id}"
                )
            if statement.property_id != first.property_id:
                raise ValueError(
                    f"All statements in a group must use the same property, "
                    f"got {first.property_id.id} and {statement.property_id.id}"
                )
        return self

    @property
    def property_id(self) -> PropertyIdValue:
        return self.statements[0].property_id

    @property
    def subject(self) -> EntityIdValue:
        return self.statements[0].subject

    def best_statements(self) -> Optional["StatementGroup"]:
        """Preferred statements if there are any, otherwise the normal ones."""
        preferred = [s for s in self.statements if s.rank == Rank.PREFERRED]
        if preferred:
            return StatementGroup(statements=tuple(preferred))
        normal = [s for s in self.statements if s.rank == Rank.NORMAL]
        if normal:
            return StatementGroup(statements=tuple(normal))
        return None

    def __len__(self) -> int:
        return len(self.statements)
