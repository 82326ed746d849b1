from abc import ABC, abstractmethod
from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Optional

from wikibase_datamodel.models.internal_representation import (
    Claim,
    DatatypeIdValue,
    EntityIdValue,
    FormDocument,
    FormIdValue,
    GlobeCoordinatesValue,
    ItemDocument,
    ItemIdValue,
    LexemeDocument,
    LexemeIdValue,
    MediaInfoDocument,
    MediaInfoIdValue,
    MonolingualTextValue,
    NoValueSnak,
    PropertyDocument,
    PropertyIdValue,
    QuantityValue,
    Rank,
    Reference,
    SenseDocument,
    SenseIdValue,
    SiteLink,
    Snak,
    SnakGroup,
    SomeValueSnak,
    Statement,
    StatementGroup,
    StringValue,
    TimeValue,
    UnsupportedValue,
    Value,
    ValueSnak,
)


class DataObjectFactory(ABC):
    """Constructs every object of the data model.

    This is the only seam through which model instances are produced, and the
    extension point for alternative backends. Each operation validates its
    invariants and raises ValidationError instead of returning an invalid
    object. Document operations take flat sequences of terms and site links;
    the factory groups them by language or site key.
    """

    @abstractmethod
    def get_item_id_value(self, id: str, site_iri: str) -> ItemIdValue: ...

    @abstractmethod
    def get_property_id_value(self, id: str, site_iri: str) -> PropertyIdValue: ...

    @abstractmethod
    def get_lexeme_id_value(self, id: str, site_iri: str) -> LexemeIdValue: ...

    @abstractmethod
    def get_form_id_value(self, id: str, site_iri: str) -> FormIdValue: ...

    @abstractmethod
    def get_sense_id_value(self, id: str, site_iri: str) -> SenseIdValue: ...

    @abstractmethod
    def get_media_info_id_value(self, id: str, site_iri: str) -> MediaInfoIdValue: ...

    @abstractmethod
    def get_datatype_id_value(self, iri: str) -> DatatypeIdValue: ...

    @abstractmethod
    def get_time_value(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        precision: int,
        before_tolerance: int,
        after_tolerance: int,
        timezone_offset: int,
        calendar_model: str,
    ) -> TimeValue: ...

    @abstractmethod
    def get_globe_coordinates_value(
        self, latitude: float, longitude: float, precision: float, globe_iri: str
    ) -> GlobeCoordinatesValue: ...

    @abstractmethod
    def get_string_value(self, text: str) -> StringValue: ...

    @abstractmethod
    def get_monolingual_text_value(
        self, text: str, language_code: str
    ) -> MonolingualTextValue: ...

    @abstractmethod
    def get_quantity_value(
        self,
        numeric_value: Decimal,
        lower_bound: Optional[Decimal],
        upper_bound: Optional[Decimal],
        unit: Optional[ItemIdValue],
    ) -> QuantityValue: ...

    @abstractmethod
    def get_unsupported_value(self, value_type: str, contents: Any) -> UnsupportedValue: ...

    @abstractmethod
    def get_value_snak(self, property_id: PropertyIdValue, value: Value) -> ValueSnak: ...

    @abstractmethod
    def get_some_value_snak(self, property_id: PropertyIdValue) -> SomeValueSnak: ...

    @abstractmethod
    def get_no_value_snak(self, property_id: PropertyIdValue) -> NoValueSnak: ...

    @abstractmethod
    def get_snak_group(self, snaks: Sequence[Snak]) -> SnakGroup: ...

    @abstractmethod
    def get_claim(
        self, subject: EntityIdValue, main_snak: Snak, qualifiers: Sequence[SnakGroup]
    ) -> Claim: ...

    @abstractmethod
    def get_reference(self, snak_groups: Sequence[SnakGroup]) -> Reference: ...

    @abstractmethod
    def get_statement(
        self,
        subject: EntityIdValue,
        main_snak: Snak,
        qualifiers: Sequence[SnakGroup],
        references: Sequence[Reference],
        rank: Rank,
        statement_id: str,
    ) -> Statement: ...

    @abstractmethod
    def get_statement_group(self, statements: Sequence[Statement]) -> StatementGroup: ...

    @abstractmethod
    def get_site_link(
        self, page_title: str, site_key: str, badges: Sequence[ItemIdValue]
    ) -> SiteLink: ...

    @abstractmethod
    def get_property_document(
        self,
        property_id: PropertyIdValue,
        labels: Sequence[MonolingualTextValue],
        descriptions: Sequence[MonolingualTextValue],
        aliases: Sequence[MonolingualTextValue],
        statement_groups: Sequence[StatementGroup],
        datatype: DatatypeIdValue,
        revision_id: int,
    ) -> PropertyDocument: ...

    @abstractmethod
    def get_item_document(
        self,
        item_id: ItemIdValue,
        labels: Sequence[MonolingualTextValue],
        descriptions: Sequence[MonolingualTextValue],
        aliases: Sequence[MonolingualTextValue],
        statement_groups: Sequence[StatementGroup],
        site_links: Sequence[SiteLink],
        revision_id: int,
    ) -> ItemDocument: ...

    @abstractmethod
    def get_lexeme_document(
        self,
        lexeme_id: LexemeIdValue,
        lexical_category: ItemIdValue,
        language: ItemIdValue,
        lemmas: Sequence[MonolingualTextValue],
        statement_groups: Sequence[StatementGroup],
        forms: Sequence[FormDocument],
        senses: Sequence[SenseDocument],
        revision_id: int,
    ) -> LexemeDocument: ...

    @abstractmethod
    def get_form_document(
        self,
        form_id: FormIdValue,
        representations: Sequence[MonolingualTextValue],
        grammatical_features: Sequence[ItemIdValue],
        statement_groups: Sequence[StatementGroup],
        revision_id: int,
    ) -> FormDocument: ...

    @abstractmethod
    def get_sense_document(
        self,
        sense_id: SenseIdValue,
        glosses: Sequence[MonolingualTextValue],
        statement_groups: Sequence[StatementGroup],
        revision_id: int,
    ) -> SenseDocument: ...

    @abstractmethod
    def get_media_info_document(
        self,
        media_info_id: MediaInfoIdValue,
        labels: Sequence[MonolingualTextValue],
        statement_groups: Sequence[StatementGroup],
        revision_id: int,
    ) -> MediaInfoDocument: ...
