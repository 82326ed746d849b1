"""Fluent builders that collect parts incrementally and emit immutable objects.

Builders keep at most one label, description or lemma per language (a later
one replaces the earlier) and group statements and qualifiers by property in
first-seen order. Each builder can be built once.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from wikibase_datamodel.models.factory import DataObjectFactory, ObjectFactory
from wikibase_datamodel.models.internal_representation import (
    DatatypeIdValue,
    EntityDocument,
    EntityIdValue,
    ItemDocument,
    ItemIdValue,
    MonolingualTextValue,
    PropertyDocument,
    PropertyIdValue,
    Rank,
    Reference,
    SiteLink,
    Snak,
    SnakGroup,
    Statement,
    StatementGroup,
    Value,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
D = TypeVar("D", bound="EntityDocumentBuilder")


class DataObjectBuilder(ABC, Generic[T]):
    def __init__(self, factory: Optional[DataObjectFactory] = None):
        self.factory = factory if factory is not None else ObjectFactory()
        self._built = False

    @abstractmethod
    def build(self) -> T: ...

    def _prepare_build(self) -> None:
        if self._built:
            raise RuntimeError(f"{type(self).__name__} can be used only once")
        self._built = True


def _group_snaks(factory: DataObjectFactory, snaks: list[Snak]) -> list[SnakGroup]:
    grouped: dict[PropertyIdValue, list[Snak]] = {}
    for snak in snaks:
        grouped.setdefault(snak.property_id, []).append(snak)
    return [factory.get_snak_group(group) for group in grouped.values()]


class EntityDocumentBuilder(DataObjectBuilder[T]):
    def __init__(self, entity_id: EntityIdValue, factory: Optional[DataObjectFactory] = None):
        super().__init__(factory)
        self.entity_id = entity_id
        self.labels: dict[str, MonolingualTextValue] = {}
        self.descriptions: dict[str, MonolingualTextValue] = {}
        self.aliases: dict[str, list[MonolingualTextValue]] = {}
        self.statements: dict[PropertyIdValue, list[Statement]] = {}
        self.revision_id = 0

    def _load(self, document: EntityDocument) -> None:
        self.labels = dict(document.labels)
        self.descriptions = dict(document.descriptions)
        self.aliases = {lang: list(values) for lang, values in document.aliases.items()}
        for group in document.statement_groups:
            self.statements.setdefault(group.property_id, []).extend(group.statements)
        self.revision_id = document.revision_id

    def with_label(self: D, text: str, language_code: str) -> D:
        self.labels[language_code] = self.factory.get_monolingual_text_value(text, language_code)
        return self

    def with_description(self: D, text: str, language_code: str) -> D:
        self.descriptions[language_code] = self.factory.get_monolingual_text_value(
            text, language_code
        )
        return self

    def with_alias(self: D, text: str, language_code: str) -> D:
        alias = self.factory.get_monolingual_text_value(text, language_code)
        self.aliases.setdefault(language_code, []).append(alias)
        return self

    def with_statement(self: D, statement: Statement) -> D:
        self.statements.setdefault(statement.property_id, []).append(statement)
        return self

    def with_revision_id(self: D, revision_id: int) -> D:
        self.revision_id = revision_id
        return self

    def _statement_groups(self) -> list[StatementGroup]:
        return [
            self.factory.get_statement_group(statements)
            for statements in self.statements.values()
        ]

    def _flat_aliases(self) -> list[MonolingualTextValue]:
        return [alias for aliases in self.aliases.values() for alias in aliases]


class ItemDocumentBuilder(EntityDocumentBuilder[ItemDocument]):
    def __init__(self, item_id: ItemIdValue, factory: Optional[DataObjectFactory] = None):
        super().__init__(item_id, factory)
        self.site_links: dict[str, SiteLink] = {}

    @classmethod
    def for_item_id(
        cls, item_id: ItemIdValue, factory: Optional[DataObjectFactory] = None
    ) -> "ItemDocumentBuilder":
        return cls(item_id, factory)

    @classmethod
    def from_document(
        cls, document: ItemDocument, factory: Optional[DataObjectFactory] = None
    ) -> "ItemDocumentBuilder":
        builder = cls(document.entity_id, factory)
        builder._load(document)
        builder.site_links = dict(document.site_links)
        return builder

    def with_site_link(
        self, page_title: str, site_key: str, badges: tuple[ItemIdValue, ...] = ()
    ) -> "ItemDocumentBuilder":
        self.site_links[site_key] = self.factory.get_site_link(page_title, site_key, badges)
        return self

    def build(self) -> ItemDocument:
        self._prepare_build()
        logger.debug(f"Building item document {self.entity_id.id}")
        return self.factory.get_item_document(
            self.entity_id,
            list(self.labels.values()),
            list(self.descriptions.values()),
            self._flat_aliases(),
            self._statement_groups(),
            list(self.site_links.values()),
            self.revision_id,
        )


class PropertyDocumentBuilder(EntityDocumentBuilder[PropertyDocument]):
    def __init__(
        self,
        property_id: PropertyIdValue,
        datatype: DatatypeIdValue,
        factory: Optional[DataObjectFactory] = None,
    ):
        super().__init__(property_id, factory)
        self.datatype = datatype

    @classmethod
    def for_property_id_and_datatype(
        cls,
        property_id: PropertyIdValue,
        datatype: DatatypeIdValue,
        factory: Optional[DataObjectFactory] = None,
    ) -> "PropertyDocumentBuilder":
        return cls(property_id, datatype, factory)

    @classmethod
    def from_document(
        cls, document: PropertyDocument, factory: Optional[DataObjectFactory] = None
    ) -> "PropertyDocumentBuilder":
        builder = cls(document.entity_id, document.datatype, factory)
        builder._load(document)
        return builder

    def build(self) -> PropertyDocument:
        self._prepare_build()
        logger.debug(f"Building property document {self.entity_id.id}")
        return self.factory.get_property_document(
            self.entity_id,
            list(self.labels.values()),
            list(self.descriptions.values()),
            self._flat_aliases(),
            self._statement_groups(),
            self.datatype,
            self.revision_id,
        )


class ReferenceBuilder(DataObjectBuilder[Reference]):
    def __init__(self, factory: Optional[DataObjectFactory] = None):
        super().__init__(factory)
        self.snaks: list[Snak] = []

    @classmethod
    def new_instance(cls, factory: Optional[DataObjectFactory] = None) -> "ReferenceBuilder":
        return cls(factory)

    def with_property_value(self, property_id: PropertyIdValue, value: Value) -> "ReferenceBuilder":
        self.snaks.append(self.factory.get_value_snak(property_id, value))
        return self

    def with_some_value(self, property_id: PropertyIdValue) -> "ReferenceBuilder":
        self.snaks.append(self.factory.get_some_value_snak(property_id))
        return self

    def with_no_value(self, property_id: PropertyIdValue) -> "ReferenceBuilder":
        self.snaks.append(self.factory.get_no_value_snak(property_id))
        return self

    def build(self) -> Reference:
        self._prepare_build()
        return self.factory.get_reference(_group_snaks(self.factory, self.snaks))


class StatementBuilder(DataObjectBuilder[Statement]):
    def __init__(
        self,
        subject: EntityIdValue,
        property_id: PropertyIdValue,
        factory: Optional[DataObjectFactory] = None,
    ):
        super().__init__(factory)
        self.subject = subject
        self.property_id = property_id
        self.main_snak: Optional[Snak] = None
        self.qualifiers: list[Snak] = []
        self.references: list[Reference] = []
        self.rank = Rank.NORMAL
        self.statement_id = ""

    @classmethod
    def for_subject_and_property(
        cls,
        subject: EntityIdValue,
        property_id: PropertyIdValue,
        factory: Optional[DataObjectFactory] = None,
    ) -> "StatementBuilder":
        return cls(subject, property_id, factory)

    def with_value(self, value: Value) -> "StatementBuilder":
        self.main_snak = self.factory.get_value_snak(self.property_id, value)
        return self

    def with_some_value(self) -> "StatementBuilder":
        self.main_snak = self.factory.get_some_value_snak(self.property_id)
        return self

    def with_no_value(self) -> "StatementBuilder":
        self.main_snak = self.factory.get_no_value_snak(self.property_id)
        return self

    def with_qualifier_value(self, property_id: PropertyIdValue, value: Value) -> "StatementBuilder":
        self.qualifiers.append(self.factory.get_value_snak(property_id, value))
        return self

    def with_qualifier_some_value(self, property_id: PropertyIdValue) -> "StatementBuilder":
        self.qualifiers.append(self.factory.get_some_value_snak(property_id))
        return self

    def with_qualifier_no_value(self, property_id: PropertyIdValue) -> "StatementBuilder":
        self.qualifiers.append(self.factory.get_no_value_snak(property_id))
        return self

    def with_qualifiers(self, groups: list[SnakGroup]) -> "StatementBuilder":
        for group in groups:
            self.qualifiers.extend(group.snaks)
        return self

    def with_reference(self, reference: Reference) -> "StatementBuilder":
        self.references.append(reference)
        return self

    def with_references(self, references: list[Reference]) -> "StatementBuilder":
        self.references.extend(references)
        return self

    def with_rank(self, rank: Rank) -> "StatementBuilder":
        self.rank = rank
        return self

    def with_id(self, statement_id: str) -> "StatementBuilder":
        self.statement_id = statement_id
        return self

    def build(self) -> Statement:
        self._prepare_build()
        # no main snak given means an unknown value
        main_snak = self.main_snak or self.factory.get_some_value_snak(self.property_id)
        return self.factory.get_statement(
            self.subject,
            main_snak,
            _group_snaks(self.factory, self.qualifiers),
            self.references,
            self.rank,
            self.statement_id,
        )
