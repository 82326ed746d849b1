from pydantic import BaseModel, ConfigDict, field_validator

from .values import ItemIdValue


class SiteLink(BaseModel):
    page_title: str
    site_key: str
    badges: tuple[ItemIdValue, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator("site_key")
    @classmethod
    def validate_site_key(cls, v: str) -> str:
        if not v:
            raise ValueError("Site link site key must not be empty")
        return v
