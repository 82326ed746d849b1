from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer, model_validator
from pydantic import ValidationError as PydanticValidationError
from typing_extensions import Annotated

from wikibase_datamodel.exceptions import ValidationError

from ..sitelinks import SiteLink
from ..statements import Statement, StatementGroup
from ..values import EntityIdValue, MonolingualTextValue, PropertyIdValue


def freeze_mapping(value: Mapping) -> Mapping:
    return MappingProxyType(dict(value))


def thaw_mapping(value: Mapping) -> dict[str, Any]:
    return dict(value)


# read-only views over private copies
TermMap = Annotated[
    Mapping[str, MonolingualTextValue],
    AfterValidator(freeze_mapping),
    PlainSerializer(thaw_mapping),
]
AliasMap = Annotated[
    Mapping[str, tuple[MonolingualTextValue, ...]],
    AfterValidator(freeze_mapping),
    PlainSerializer(thaw_mapping),
]
SiteLinkMap = Annotated[
    Mapping[str, SiteLink],
    AfterValidator(freeze_mapping),
    PlainSerializer(thaw_mapping),
]


def check_language_keys(field: str, terms: Mapping[str, MonolingualTextValue]) -> None:
    for language, term in terms.items():
        if term.language_code != language:
            raise ValueError(
                f"{field} entry for language {language!r} has language code {term.language_code!r}"
            )


class EntityDocument(BaseModel):
    """Fields shared by every entity document.

    Labels and descriptions hold at most one text per language, aliases keep
    their per-language order. A revision id of 0 means unknown. Term and
    site link mappings are read-only.
    """

    entity_id: EntityIdValue
    labels: TermMap = {}
    descriptions: TermMap = {}
    aliases: AliasMap = {}
    statement_groups: tuple[StatementGroup, ...] = ()
    revision_id: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True, validate_default=True)

    @model_validator(mode="after")
    def validate_terms(self) -> "EntityDocument":
        check_language_keys("Label", self.labels)
        check_language_keys("Description", self.descriptions)
        for language, aliases in self.aliases.items():
            for alias in aliases:
                check_language_keys("Alias", {language: alias})
        return self

    def find_statement_group(
        self, property_id: Union[PropertyIdValue, str]
    ) -> Optional[StatementGroup]:
        for group in self.statement_groups:
            if isinstance(property_id, PropertyIdValue):
                if group.property_id == property_id:
                    return group
            elif group.property_id.id == property_id:
                return group
        return None

    def has_statement(self, property_id: Union[PropertyIdValue, str]) -> bool:
        return self.find_statement_group(property_id) is not None

    def all_statements(self) -> list[Statement]:
        return [s for group in self.statement_groups for s in group.statements]

    def _replace(self, **changes: Any) -> "EntityDocument":
        fields = dict(self)
        fields.update(changes)
        try:
            return type(self)(**fields)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(type(self).__name__, e) from e

    def with_revision_id(self, revision_id: int) -> "EntityDocument":
        return self._replace(revision_id=revision_id)

    def with_label(self, label: MonolingualTextValue) -> "EntityDocument":
        labels = dict(self.labels)
        labels[label.language_code] = label
        return self._replace(labels=labels)
