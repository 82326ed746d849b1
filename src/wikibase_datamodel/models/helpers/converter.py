import logging
from collections.abc import Mapping, Sequence
from typing import Any

from wikibase_datamodel.exceptions import UnsupportedVariant
from wikibase_datamodel.models.factory import DataObjectFactory
from wikibase_datamodel.models.internal_representation import (
    Claim,
    DatatypeIdValue,
    EntityDocument,
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
    Reference,
    SenseDocument,
    SenseIdValue,
    SiteLink,
    Snak,
    SnakGroup,
    SnakVisitor,
    SomeValueSnak,
    Statement,
    StatementGroup,
    StringValue,
    TimeValue,
    UnsupportedValue,
    Value,
    ValueSnak,
    ValueVisitor,
)

logger = logging.getLogger(__name__)


class DatamodelConverter(ValueVisitor[Value], SnakVisitor[Snak]):
    """
    Re-creates data model objects through a given factory.

    Model objects are immutable and never need copying for protection; the
    converter exists to move an object graph onto another factory
    implementation. Sequence order is preserved everywhere, nothing is
    deduplicated or re-sorted, and ids, ranks and revision ids are copied
    verbatim. Unsupported values are returned as they are.
    """

    def __init__(self, factory: DataObjectFactory):
        self.factory = factory

    def copy(self, obj: Any) -> Any:
        """Copy any model object by dispatching on its type."""
        if isinstance(obj, Value):
            return self.copy_value(obj)
        if isinstance(obj, Snak):
            return self.copy_snak(obj)
        if isinstance(obj, EntityDocument):
            return self.copy_document(obj)
        if isinstance(obj, Statement):
            return self.copy_statement(obj)
        if isinstance(obj, StatementGroup):
            return self.copy_statement_group(obj)
        if isinstance(obj, SnakGroup):
            return self.copy_snak_group(obj)
        if isinstance(obj, Claim):
            return self.copy_claim(obj)
        if isinstance(obj, Reference):
            return self.copy_reference(obj)
        if isinstance(obj, SiteLink):
            return self.copy_site_link(obj)
        if isinstance(obj, DatatypeIdValue):
            return self.copy_datatype_id_value(obj)
        raise UnsupportedVariant(
            type(obj), f"Cannot convert objects of type {type(obj).__name__}"
        )

    # Entity ids

    def copy_item_id_value(self, value: ItemIdValue) -> ItemIdValue:
        return self.factory.get_item_id_value(value.id, value.site_iri)

    def copy_property_id_value(self, value: PropertyIdValue) -> PropertyIdValue:
        return self.factory.get_property_id_value(value.id, value.site_iri)

    def copy_lexeme_id_value(self, value: LexemeIdValue) -> LexemeIdValue:
        return self.factory.get_lexeme_id_value(value.id, value.site_iri)

    def copy_form_id_value(self, value: FormIdValue) -> FormIdValue:
        return self.factory.get_form_id_value(value.id, value.site_iri)

    def copy_sense_id_value(self, value: SenseIdValue) -> SenseIdValue:
        return self.factory.get_sense_id_value(value.id, value.site_iri)

    def copy_media_info_id_value(self, value: MediaInfoIdValue) -> MediaInfoIdValue:
        return self.factory.get_media_info_id_value(value.id, value.site_iri)

    def copy_datatype_id_value(self, value: DatatypeIdValue) -> DatatypeIdValue:
        return self.factory.get_datatype_id_value(value.iri)

    # Other values

    def copy_time_value(self, value: TimeValue) -> TimeValue:
        return self.factory.get_time_value(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.precision,
            value.before_tolerance,
            value.after_tolerance,
            value.timezone_offset,
            value.calendar_model,
        )

    def copy_globe_coordinates_value(
        self, value: GlobeCoordinatesValue
    ) -> GlobeCoordinatesValue:
        return self.factory.get_globe_coordinates_value(
            value.latitude, value.longitude, value.precision, value.globe_iri
        )

    def copy_string_value(self, value: StringValue) -> StringValue:
        return self.factory.get_string_value(value.text)

    def copy_monolingual_text_value(
        self, value: MonolingualTextValue
    ) -> MonolingualTextValue:
        return self.factory.get_monolingual_text_value(value.text, value.language_code)

    def copy_quantity_value(self, value: QuantityValue) -> QuantityValue:
        unit = self.copy_item_id_value(value.unit) if value.unit is not None else None
        return self.factory.get_quantity_value(
            value.numeric_value, value.lower_bound, value.upper_bound, unit
        )

    def copy_unsupported_value(self, value: UnsupportedValue) -> UnsupportedValue:
        # opaque contents, nothing to rebuild
        return value

    def copy_value(self, value: Value) -> Value:
        if not isinstance(value, Value):
            raise UnsupportedVariant(
                type(value), f"Cannot convert value of type {type(value).__name__}"
            )
        return value.accept(self)

    # Snaks

    def copy_value_snak(self, snak: ValueSnak) -> ValueSnak:
        return self.factory.get_value_snak(
            self.copy_property_id_value(snak.property_id), self.copy_value(snak.value)
        )

    def copy_some_value_snak(self, snak: SomeValueSnak) -> SomeValueSnak:
        return self.factory.get_some_value_snak(self.copy_property_id_value(snak.property_id))

    def copy_no_value_snak(self, snak: NoValueSnak) -> NoValueSnak:
        return self.factory.get_no_value_snak(self.copy_property_id_value(snak.property_id))

    def copy_snak(self, snak: Snak) -> Snak:
        if not isinstance(snak, Snak):
            raise UnsupportedVariant(
                type(snak), f"Cannot convert snak of type {type(snak).__name__}"
            )
        return snak.accept(self)

    def copy_snak_group(self, group: SnakGroup) -> SnakGroup:
        return self.factory.get_snak_group([self.copy_snak(snak) for snak in group.snaks])

    def copy_snak_groups(self, groups: Sequence[SnakGroup]) -> list[SnakGroup]:
        return [self.copy_snak_group(group) for group in groups]

    # Claims and statements

    def copy_subject(self, subject: EntityIdValue) -> EntityIdValue:
        """Re-derive a claim subject through the value dispatch."""
        copied = self.copy_value(subject)
        if not isinstance(copied, EntityIdValue):
            raise UnsupportedVariant(
                type(subject), f"Subject of type {type(subject).__name__} is not an entity id"
            )
        return copied

    def copy_claim(self, claim: Claim) -> Claim:
        return self.factory.get_claim(
            self.copy_subject(claim.subject),
            self.copy_snak(claim.main_snak),
            self.copy_snak_groups(claim.qualifiers),
        )

    def copy_reference(self, reference: Reference) -> Reference:
        return self.factory.get_reference(self.copy_snak_groups(reference.snak_groups))

    def copy_statement(self, statement: Statement) -> Statement:
        return self.factory.get_statement(
            self.copy_subject(statement.subject),
            self.copy_snak(statement.main_snak),
            self.copy_snak_groups(statement.qualifiers),
            [self.copy_reference(reference) for reference in statement.references],
            statement.rank,
            statement.statement_id,
        )

    def copy_statement_group(self, group: StatementGroup) -> StatementGroup:
        return self.factory.get_statement_group(
            [self.copy_statement(statement) for statement in group.statements]
        )

    def copy_statement_groups(self, groups: Sequence[StatementGroup]) -> list[StatementGroup]:
        return [self.copy_statement_group(group) for group in groups]

    def copy_site_link(self, site_link: SiteLink) -> SiteLink:
        return self.factory.get_site_link(
            site_link.page_title,
            site_link.site_key,
            [self.copy_item_id_value(badge) for badge in site_link.badges],
        )

    # Terms

    def copy_monolingual_text_values(
        self, values: Mapping[str, MonolingualTextValue]
    ) -> list[MonolingualTextValue]:
        """Flatten a language-keyed term map into copies, in mapping order."""
        return [self.copy_monolingual_text_value(value) for value in values.values()]

    def copy_alias_map(
        self, aliases: Mapping[str, Sequence[MonolingualTextValue]]
    ) -> list[MonolingualTextValue]:
        """
        Flatten aliases grouped by language into one list of copies.

        Languages come in mapping order; within a language the alias order
        is kept.
        """
        return [
            self.copy_monolingual_text_value(alias)
            for language_aliases in aliases.values()
            for alias in language_aliases
        ]

    # Documents

    def copy_item_document(self, document: ItemDocument) -> ItemDocument:
        return self.factory.get_item_document(
            self.copy_item_id_value(document.entity_id),
            self.copy_monolingual_text_values(document.labels),
            self.copy_monolingual_text_values(document.descriptions),
            self.copy_alias_map(document.aliases),
            self.copy_statement_groups(document.statement_groups),
            [self.copy_site_link(link) for link in document.site_links.values()],
            document.revision_id,
        )

    def copy_property_document(self, document: PropertyDocument) -> PropertyDocument:
        return self.factory.get_property_document(
            self.copy_property_id_value(document.entity_id),
            self.copy_monolingual_text_values(document.labels),
            self.copy_monolingual_text_values(document.descriptions),
            self.copy_alias_map(document.aliases),
            self.copy_statement_groups(document.statement_groups),
            self.copy_datatype_id_value(document.datatype),
            document.revision_id,
        )

    def copy_form_document(self, document: FormDocument) -> FormDocument:
        return self.factory.get_form_document(
            self.copy_form_id_value(document.entity_id),
            self.copy_monolingual_text_values(document.representations),
            [self.copy_item_id_value(feature) for feature in document.grammatical_features],
            self.copy_statement_groups(document.statement_groups),
            document.revision_id,
        )

    def copy_sense_document(self, document: SenseDocument) -> SenseDocument:
        return self.factory.get_sense_document(
            self.copy_sense_id_value(document.entity_id),
            self.copy_monolingual_text_values(document.glosses),
            self.copy_statement_groups(document.statement_groups),
            document.revision_id,
        )

    def copy_lexeme_document(self, document: LexemeDocument) -> LexemeDocument:
        return self.factory.get_lexeme_document(
            self.copy_lexeme_id_value(document.entity_id),
            self.copy_item_id_value(document.lexical_category),
            self.copy_item_id_value(document.language),
            self.copy_monolingual_text_values(document.lemmas),
            self.copy_statement_groups(document.statement_groups),
            [self.copy_form_document(form) for form in document.forms],
            [self.copy_sense_document(sense) for sense in document.senses],
            document.revision_id,
        )

    def copy_media_info_document(self, document: MediaInfoDocument) -> MediaInfoDocument:
        return self.factory.get_media_info_document(
            self.copy_media_info_id_value(document.entity_id),
            self.copy_monolingual_text_values(document.labels),
            self.copy_statement_groups(document.statement_groups),
            document.revision_id,
        )

    def copy_document(self, document: EntityDocument) -> EntityDocument:
        logger.debug(
            f"Converting {type(document).__name__} {document.entity_id.id} "
            f"with {type(self.factory).__name__}"
        )
        if isinstance(document, ItemDocument):
            return self.copy_item_document(document)
        if isinstance(document, PropertyDocument):
            return self.copy_property_document(document)
        if isinstance(document, LexemeDocument):
            return self.copy_lexeme_document(document)
        if isinstance(document, FormDocument):
            return self.copy_form_document(document)
        if isinstance(document, SenseDocument):
            return self.copy_sense_document(document)
        if isinstance(document, MediaInfoDocument):
            return self.copy_media_info_document(document)
        raise UnsupportedVariant(
            type(document), f"Cannot convert document of type {type(document).__name__}"
        )

    # Visitor callbacks

    def visit_entity_id_value(self, value: EntityIdValue) -> EntityIdValue:
        if isinstance(value, ItemIdValue):
            return self.copy_item_id_value(value)
        if isinstance(value, PropertyIdValue):
            return self.copy_property_id_value(value)
        if isinstance(value, LexemeIdValue):
            return self.copy_lexeme_id_value(value)
        if isinstance(value, FormIdValue):
            return self.copy_form_id_value(value)
        if isinstance(value, SenseIdValue):
            return self.copy_sense_id_value(value)
        if isinstance(value, MediaInfoIdValue):
            return self.copy_media_info_id_value(value)
        raise UnsupportedVariant(
            type(value), f"Cannot convert entity id value: {type(value).__name__}"
        )

    def visit_globe_coordinates_value(self, value: GlobeCoordinatesValue) -> Value:
        return self.copy_globe_coordinates_value(value)

    def visit_monolingual_text_value(self, value: MonolingualTextValue) -> Value:
        return self.copy_monolingual_text_value(value)

    def visit_quantity_value(self, value: QuantityValue) -> Value:
        return self.copy_quantity_value(value)

    def visit_string_value(self, value: StringValue) -> Value:
        return self.copy_string_value(value)

    def visit_time_value(self, value: TimeValue) -> Value:
        return self.copy_time_value(value)

    def visit_unsupported_value(self, value: UnsupportedValue) -> Value:
        return self.copy_unsupported_value(value)

    def visit_value_snak(self, snak: ValueSnak) -> Snak:
        return self.copy_value_snak(snak)

    def visit_some_value_snak(self, snak: SomeValueSnak) -> Snak:
        return self.copy_some_value_snak(snak)

    def visit_no_value_snak(self, snak: NoValueSnak) -> Snak:
        return self.copy_no_value_snak(snak)
