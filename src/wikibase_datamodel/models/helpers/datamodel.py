from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Optional, Union

from wikibase_datamodel.config import settings
from wikibase_datamodel.models.factory import DataObjectFactory, ObjectFactory
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
    TimePrecision,
    TimeValue,
    UnsupportedValue,
    Value,
    ValueSnak,
    Vocab,
)

Number = Union[Decimal, int, str]


class Datamodel:
    """Convenience constructors with defaulted parameters.

    Every call goes through the factory given at construction time. Without
    one, a private ObjectFactory is used. Default site IRIs come from the
    settings unless passed explicitly.
    """

    def __init__(
        self,
        factory: Optional[DataObjectFactory] = None,
        site_iri: Optional[str] = None,
        media_site_iri: Optional[str] = None,
    ):
        self.factory = factory if factory is not None else ObjectFactory()
        self.site_iri = site_iri or settings.default_site_iri
        self.media_site_iri = media_site_iri or settings.media_site_iri

    # Entity ids

    def make_item_id_value(self, id: str, site_iri: str) -> ItemIdValue:
        return self.factory.get_item_id_value(id, site_iri)

    def make_wikidata_item_id_value(self, id: str) -> ItemIdValue:
        return self.factory.get_item_id_value(id, self.site_iri)

    def make_property_id_value(self, id: str, site_iri: str) -> PropertyIdValue:
        return self.factory.get_property_id_value(id, site_iri)

    def make_wikidata_property_id_value(self, id: str) -> PropertyIdValue:
        return self.factory.get_property_id_value(id, self.site_iri)

    def make_lexeme_id_value(self, id: str, site_iri: str) -> LexemeIdValue:
        return self.factory.get_lexeme_id_value(id, site_iri)

    def make_wikidata_lexeme_id_value(self, id: str) -> LexemeIdValue:
        return self.factory.get_lexeme_id_value(id, self.site_iri)

    def make_form_id_value(self, id: str, site_iri: str) -> FormIdValue:
        return self.factory.get_form_id_value(id, site_iri)

    def make_wikidata_form_id_value(self, id: str) -> FormIdValue:
        return self.factory.get_form_id_value(id, self.site_iri)

    def make_sense_id_value(self, id: str, site_iri: str) -> SenseIdValue:
        return self.factory.get_sense_id_value(id, site_iri)

    def make_wikidata_sense_id_value(self, id: str) -> SenseIdValue:
        return self.factory.get_sense_id_value(id, self.site_iri)

    def make_media_info_id_value(self, id: str, site_iri: str) -> MediaInfoIdValue:
        return self.factory.get_media_info_id_value(id, site_iri)

    def make_wikimedia_commons_media_info_id_value(self, id: str) -> MediaInfoIdValue:
        return self.factory.get_media_info_id_value(id, self.media_site_iri)

    def make_datatype_id_value(self, iri: str) -> DatatypeIdValue:
        return self.factory.get_datatype_id_value(iri)

    # Values

    def make_time_value(
        self,
        year: int,
        month: int,
        day: int,
        hour: Optional[int] = None,
        minute: Optional[int] = None,
        second: Optional[int] = None,
        precision: Optional[int] = None,
        before_tolerance: int = 0,
        after_tolerance: int = 0,
        timezone_offset: int = 0,
        calendar_model: str = Vocab.CM_GREGORIAN_PRO,
    ) -> TimeValue:
        """Time value; precision defaults to seconds when a time of day is given, else days."""
        clock = (hour, minute, second)
        if precision is None:
            has_clock = any(part is not None for part in clock)
            precision = TimePrecision.SECOND if has_clock else TimePrecision.DAY
        hour, minute, second = (part or 0 for part in clock)
        return self.factory.get_time_value(
            year,
            month,
            day,
            hour,
            minute,
            second,
            precision,
            before_tolerance,
            after_tolerance,
            timezone_offset,
            calendar_model,
        )

    def make_globe_coordinates_value(
        self,
        latitude: float,
        longitude: float,
        precision: float = 1 / 3600,
        globe_iri: str = Vocab.GLOBE_EARTH,
    ) -> GlobeCoordinatesValue:
        return self.factory.get_globe_coordinates_value(latitude, longitude, precision, globe_iri)

    def make_string_value(self, text: str) -> StringValue:
        return self.factory.get_string_value(text)

    def make_monolingual_text_value(self, text: str, language_code: str) -> MonolingualTextValue:
        return self.factory.get_monolingual_text_value(text, language_code)

    def make_quantity_value(
        self,
        numeric_value: Number,
        lower_bound: Optional[Number] = None,
        upper_bound: Optional[Number] = None,
        unit: Optional[ItemIdValue] = None,
    ) -> QuantityValue:
        return self.factory.get_quantity_value(numeric_value, lower_bound, upper_bound, unit)

    def make_unsupported_value(self, value_type: str, contents: Any = None) -> UnsupportedValue:
        return self.factory.get_unsupported_value(value_type, contents)

    # Snaks and statements

    def make_value_snak(self, property_id: PropertyIdValue, value: Value) -> ValueSnak:
        return self.factory.get_value_snak(property_id, value)

    def make_some_value_snak(self, property_id: PropertyIdValue) -> SomeValueSnak:
        return self.factory.get_some_value_snak(property_id)

    def make_no_value_snak(self, property_id: PropertyIdValue) -> NoValueSnak:
        return self.factory.get_no_value_snak(property_id)

    def make_snak_group(self, snaks: Sequence[Snak]) -> SnakGroup:
        return self.factory.get_snak_group(snaks)

    def make_claim(
        self,
        subject: EntityIdValue,
        main_snak: Snak,
        qualifiers: Sequence[SnakGroup] = (),
    ) -> Claim:
        return self.factory.get_claim(subject, main_snak, qualifiers)

    def make_reference(self, snak_groups: Sequence[SnakGroup] = ()) -> Reference:
        return self.factory.get_reference(snak_groups)

    def make_statement(
        self,
        subject: EntityIdValue,
        main_snak: Snak,
        qualifiers: Sequence[SnakGroup] = (),
        references: Sequence[Reference] = (),
        rank: Rank = Rank.NORMAL,
        statement_id: str = "",
    ) -> Statement:
        return self.factory.get_statement(
            subject, main_snak, qualifiers, references, rank, statement_id
        )

    def make_statement_from_claim(
        self,
        claim: Claim,
        references: Sequence[Reference] = (),
        rank: Rank = Rank.NORMAL,
        statement_id: str = "",
    ) -> Statement:
        return self.factory.get_statement(
            claim.subject, claim.main_snak, claim.qualifiers, references, rank, statement_id
        )

    def make_statement_group(self, statements: Sequence[Statement]) -> StatementGroup:
        return self.factory.get_statement_group(statements)

    def make_site_link(
        self, page_title: str, site_key: str, badges: Sequence[ItemIdValue] = ()
    ) -> SiteLink:
        return self.factory.get_site_link(page_title, site_key, badges)

    # Documents

    def make_property_document(
        self,
        property_id: PropertyIdValue,
        datatype: DatatypeIdValue,
        labels: Sequence[MonolingualTextValue] = (),
        descriptions: Sequence[MonolingualTextValue] = (),
        aliases: Sequence[MonolingualTextValue] = (),
        statement_groups: Sequence[StatementGroup] = (),
        revision_id: int = 0,
    ) -> PropertyDocument:
        return self.factory.get_property_document(
            property_id, labels, descriptions, aliases, statement_groups, datatype, revision_id
        )

    def make_item_document(
        self,
        item_id: ItemIdValue,
        labels: Sequence[MonolingualTextValue] = (),
        descriptions: Sequence[MonolingualTextValue] = (),
        aliases: Sequence[MonolingualTextValue] = (),
        statement_groups: Sequence[StatementGroup] = (),
        site_links: Sequence[SiteLink] = (),
        revision_id: int = 0,
    ) -> ItemDocument:
        return self.factory.get_item_document(
            item_id, labels, descriptions, aliases, statement_groups, site_links, revision_id
        )

    def make_lexeme_document(
        self,
        lexeme_id: LexemeIdValue,
        lexical_category: ItemIdValue,
        language: ItemIdValue,
        lemmas: Sequence[MonolingualTextValue],
        statement_groups: Sequence[StatementGroup] = (),
        forms: Sequence[FormDocument] = (),
        senses: Sequence[SenseDocument] = (),
        revision_id: int = 0,
    ) -> LexemeDocument:
        return self.factory.get_lexeme_document(
            lexeme_id,
            lexical_category,
            language,
            lemmas,
            statement_groups,
            forms,
            senses,
            revision_id,
        )

    def make_form_document(
        self,
        form_id: FormIdValue,
        representations: Sequence[MonolingualTextValue],
        grammatical_features: Sequence[ItemIdValue] = (),
        statement_groups: Sequence[StatementGroup] = (),
        revision_id: int = 0,
    ) -> FormDocument:
        return self.factory.get_form_document(
            form_id, representations, grammatical_features, statement_groups, revision_id
        )

    def make_sense_document(
        self,
        sense_id: SenseIdValue,
        glosses: Sequence[MonolingualTextValue],
        statement_groups: Sequence[StatementGroup] = (),
        revision_id: int = 0,
    ) -> SenseDocument:
        return self.factory.get_sense_document(sense_id, glosses, statement_groups, revision_id)

    def make_media_info_document(
        self,
        media_info_id: MediaInfoIdValue,
        labels: Sequence[MonolingualTextValue] = (),
        statement_groups: Sequence[StatementGroup] = (),
        revision_id: int = 0,
    ) -> MediaInfoDocument:
        return self.factory.get_media_info_document(
            media_info_id, labels, statement_groups, revision_id
        )
