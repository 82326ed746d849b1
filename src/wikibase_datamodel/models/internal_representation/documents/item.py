from pydantic import model_validator

from ..values import ItemIdValue
from .base import EntityDocument, SiteLinkMap


class ItemDocument(EntityDocument):
    entity_id: ItemIdValue
    site_links: SiteLinkMap = {}

    @model_validator(mode="after")
    def validate_site_links(self) -> "ItemDocument":
        for site_key, site_link in self.site_links.items():
            if site_link.site_key != site_key:
                raise ValueError(
                    f"Site link stored under {site_key!r} points to site {site_link.site_key!r}"
                )
        return self
