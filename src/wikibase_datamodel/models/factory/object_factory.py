import logging
from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Optional, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from wikibase_datamodel.exceptions import ValidationError
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

from .base import DataObjectFactory

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ObjectFactory(DataObjectFactory):
    """Default factory producing the immutable pydantic models."""

    def _create(self, model: type[M], **fields: Any) -> M:
        try:
            return model(**fields)
        except PydanticValidationError as e:
            logger.debug(f"Rejected {model.__name__}: {e.error_count()} error(s)")
            raise ValidationError.from_pydantic(model.__name__, e) from e

    @staticmethod
    def _terms_by_language(
        model: str, field: str, terms: Sequence[MonolingualTextValue]
    ) -> dict[str, MonolingualTextValue]:
        result: dict[str, MonolingualTextValue] = {}
        for term in terms:
            if term.language_code in result:
                raise ValidationError(
                    model,
                    f"at most one {field} per language allowed, "
                    f"got a second one for {term.language_code!r}",
                )
            result[term.language_code] = term
        return result

    @staticmethod
    def _aliases_by_language(
        aliases: Sequence[MonolingualTextValue],
    ) -> dict[str, tuple[MonolingualTextValue, ...]]:
        result: dict[str, list[MonolingualTextValue]] = {}
        for alias in aliases:
            result.setdefault(alias.language_code, []).append(alias)
        return {language: tuple(values) for language, values in result.items()}

    @staticmethod
    def _site_links_by_key(site_links: Sequence[SiteLink]) -> dict[str, SiteLink]:
        result: dict[str, SiteLink] = {}
        for site_link in site_links:
            if site_link.site_key in result:
                raise ValidationError(
                    ItemDocument.__name__,
                    f"at most one site link per site allowed, got a second one for {site_link.site_key!r}",
                )
            result[site_link.site_key] = site_link
        return result

    def get_item_id_value(self, id: str, site_iri: str) -> ItemIdValue:
        return self._create(ItemIdValue, id=id, site_iri=site_iri)

    def get_property_id_value(self, id: str, site_iri: str) -> PropertyIdValue:
        return self._create(PropertyIdValue, id=id, site_iri=site_iri)

    def get_lexeme_id_value(self, id: str, site_iri: str) -> LexemeIdValue:
        return self._create(LexemeIdValue, id=id, site_iri=site_iri)

    def get_form_id_value(self, id: str, site_iri: str) -> FormIdValue:
        return self._create(FormIdValue, id=id, site_iri=site_iri)

    def get_sense_id_value(self, id: str, site_iri: str) -> SenseIdValue:
        return self._create(SenseIdValue, id=id, site_iri=site_iri)

    def get_media_info_id_value(self, id: str, site_iri: str) -> MediaInfoIdValue:
        return self._create(MediaInfoIdValue, id=id, site_iri=site_iri)

    def get_datatype_id_value(self, iri: str) -> DatatypeIdValue:
        return self._create(DatatypeIdValue, iri=iri)

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
    ) -> TimeValue:
        return self._create(
            TimeValue,
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            precision=precision,
            before_tolerance=before_tolerance,
            after_tolerance=after_tolerance,
            timezone_offset=timezone_offset,
            calendar_model=calendar_model,
        )

    def get_globe_coordinates_value(
        self, latitude: float, longitude: float, precision: float, globe_iri: str
    ) -> GlobeCoordinatesValue:
        return self._create(
            GlobeCoordinatesValue,
            latitude=latitude,
            longitude=longitude,
            precision=precision,
            globe_iri=globe_iri,
        )

    def get_string_value(self, text: str) -> StringValue:
        return self._create(StringValue, text=text)

    def get_monolingual_text_value(
        self, text: str, language_code: str
    ) -> MonolingualTextValue:
        return self._create(MonolingualTextValue, text=text, language_code=language_code)

    def get_quantity_value(
        self,
        numeric_value: Decimal,
        lower_bound: Optional[Decimal],
        upper_bound: Optional[Decimal],
        unit: Optional[ItemIdValue],
    ) -> QuantityValue:
        return self._create(
            QuantityValue,
            numeric_value=numeric_value,
            lower_bound=lower_bound,
            upper_bound=upper_bound,
            unit=unit,
        )

    def get_unsupported_value(self, value_type: str, contents: Any) -> UnsupportedValue:
        return self._create(UnsupportedValue, value_type=value_type, contents=contents)

    def get_value_snak(self, property_id: PropertyIdValue, value: Value) -> ValueSnak:
        return self._create(ValueSnak, property_id=property_id, value=value)

    def get_some_value_snak(self, property_id: PropertyIdValue) -> SomeValueSnak:
        return self._create(SomeValueSnak, property_id=property_id)

    def get_no_value_snak(self, property_id: PropertyIdValue) -> NoValueSnak:
        return self._create(NoValueSnak, property_id=property_id)

    def get_snak_group(self, snaks: Sequence[Snak]) -> SnakGroup:
        return self._create(SnakGroup, snaks=tuple(snaks))

    def get_claim(
        self, subject: EntityIdValue, main_snak: Snak, qualifiers: Sequence[SnakGroup]
    ) -> Claim:
        return self._create(
            Claim, subject=subject, main_snak=main_snak, qualifiers=tuple(qualifiers)
        )

    def get_reference(self, snak_groups: Sequence[SnakGroup]) -> Reference:
        return self._create(Reference, snak_groups=tuple(snak_groups))

    def get_statement(
        self,
        subject: EntityIdValue,
        main_snak: Snak,
        qualifiers: Sequence[SnakGroup],
        references: Sequence[Reference],
        rank: Rank,
        statement_id: str,
    ) -> Statement:
        return self._create(
            Statement,
            subject=subject,
            main_snak=main_snak,
            qualifiers=tuple(qualifiers),
            references=tuple(references),
            rank=rank,
            statement_id=statement_id,
        )

    def get_statement_group(self, statements: Sequence[Statement]) -> StatementGroup:
        return self._create(StatementGroup, statements=tuple(statements))

    def get_site_link(
        self, page_title: str, site_key: str, badges: Sequence[ItemIdValue]
    ) -> SiteLink:
        return self._create(
            SiteLink, page_title=page_title, site_key=site_key, badges=tuple(badges)
        )

    def get_property_document(
        self,
        property_id: PropertyIdValue,
        labels: Sequence[MonolingualTextValue],
        descriptions: Sequence[MonolingualTextValue],
        aliases: Sequence[MonolingualTextValue],
        statement_groups: Sequence[StatementGroup],
        datatype: DatatypeIdValue,
        revision_id: int,
    ) -> PropertyDocument:
        model = PropertyDocument.__name__
        return self._create(
            PropertyDocument,
            entity_id=property_id,
            labels=self._terms_by_language(model, "label", labels),
            descriptions=self._terms_by_language(model, "description", descriptions),
            aliases=self._aliases_by_language(aliases),
            statement_groups=tuple(statement_groups),
            datatype=datatype,
            revision_id=revision_id,
        )

    def get_item_document(
        self,
        item_id: ItemIdValue,
        labels: Sequence[MonolingualTextValue],
        descriptions: Sequence[MonolingualTextValue],
        aliases: Sequence[MonolingualTextValue],
        statement_groups: Sequence[StatementGroup],
        site_links: Sequence[SiteLink],
        revision_id: int,
    ) -> ItemDocument:
        model = ItemDocument.__name__
        return self._create(
            ItemDocument,
            entity_id=item_id,
            labels=self._terms_by_language(model, "label", labels),
            descriptions=self._terms_by_language(model, "description", descriptions),
            aliases=self._aliases_by_language(aliases),
            statement_groups=tuple(statement_groups),
            site_links=self._site_links_by_key(site_links),
            revision_id=revision_id,
        )

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
    ) -> LexemeDocument:
        return self._create(
            LexemeDocument,
            entity_id=lexeme_id,
            lexical_category=lexical_category,
            language=language,
            lemmas=self._terms_by_language(LexemeDocument.__name__, "lemma", lemmas),
            statement_groups=tuple(statement_groups),
            forms=tuple(forms),
            senses=tuple(senses),
            revision_id=revision_id,
        )

    def get_form_document(
        self,
        form_id: FormIdValue,
        representations: Sequence[MonolingualTextValue],
        grammatical_features: Sequence[ItemIdValue],
        statement_groups: Sequence[StatementGroup],
        revision_id: int,
    ) -> FormDocument:
        return self._create(
            FormDocument,
            entity_id=form_id,
            representations=self._terms_by_language(
                FormDocument.__name__, "representation", representations
            ),
            grammatical_features=tuple(grammatical_features),
            statement_groups=tuple(statement_groups),
            revision_id=revision_id,
        )

    def get_sense_document(
        self,
        sense_id: SenseIdValue,
        glosses: Sequence[MonolingualTextValue],
        statement_groups: Sequence[StatementGroup],
        revision_id: int,
    ) -> SenseDocument:
        return self._create(
            SenseDocument,
            entity_id=sense_id,
            glosses=self._terms_by_language(SenseDocument.__name__, "gloss", glosses),
            statement_groups=tuple(statement_groups),
            revision_id=revision_id,
        )

    def get_media_info_document(
        self,
        media_info_id: MediaInfoIdValue,
        labels: Sequence[MonolingualTextValue],
        statement_groups: Sequence[StatementGroup],
        revision_id: int,
    ) -> MediaInfoDocument:
        return self._create(
            MediaInfoDocument,
            entity_id=media_info_id,
            labels=self._terms_by_language(MediaInfoDocument.__name__, "label", labels),
            statement_groups=tuple(statement_groups),
            revision_id=revision_id,
        )
