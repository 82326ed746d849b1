from pydantic import BaseModel, ConfigDict

from .snaks import Snak, SnakGroup
from .values import EntityIdValue


class Claim(BaseModel):
    subject: EntityIdValue
    main_snak: Snak
    qualifiers: tuple[SnakGroup, ...] = ()

    model_config = ConfigDict(frozen=True)
