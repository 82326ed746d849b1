from pydantic import BaseModel, ConfigDict, field_validator


class DatatypeIdValue(BaseModel):
    """IRI of the datatype a property accepts. Not restricted to the known IRIs."""

    iri: str

    model_config = ConfigDict(frozen=True)

    @field_validator("iri")
    @classmethod
    def validate_iri(cls, v: str) -> str:
        if not v:
            raise ValueError("Datatype IRI must not be empty")
        return v
