from pydantic import BaseModel, ConfigDict

from .snaks import Snak, SnakGroup


class Reference(BaseModel):
    """Provenance evidence for a statement, kept in the order it was given."""

    snak_groups: tuple[SnakGroup, ...] = ()

    model_config = ConfigDict(frozen=True)

    def all_snaks(self) -> list[Snak]:
        return [snak for group in self.snak_groups for snak in group.snaks]
