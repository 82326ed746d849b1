from pydantic import model_validator

from ..values import (
    FormIdValue,
    ItemIdValue,
    LexemeIdValue,
    SenseIdValue,
)
from .base import EntityDocument, TermMap, check_language_keys


class FormDocument(EntityDocument):
    entity_id: FormIdValue
    representations: TermMap = {}
    grammatical_features: tuple[ItemIdValue, ...] = ()

    @model_validator(mode="after")
    def validate_representations(self) -> "FormDocument":
        check_language_keys("Representation", self.representations)
        return self


class SenseDocument(EntityDocument):
    entity_id: SenseIdValue
    glosses: TermMap = {}

    @model_validator(mode="after")
    def validate_glosses(self) -> "SenseDocument":
        check_language_keys("Gloss", self.glosses)
        return self


class LexemeDocument(EntityDocument):
    entity_id: LexemeIdValue
    lexical_category: ItemIdValue
    language: ItemIdValue
    lemmas: TermMap = {}
    forms: tuple[FormDocument, ...] = ()
    senses: tuple[SenseDocument, ...] = ()

    @model_validator(mode="after")
    def validate_lemmas(self) -> "LexemeDocument":
        check_language_keys("Lemma", self.lemmas)
        return self

    def find_form(self, form_id: FormIdValue) -> FormDocument | None:
        for form in self.forms:
            if form.entity_id == form_id:
                return form
        return None

    def find_sense(self, sense_id: SenseIdValue) -> SenseDocument | None:
        for sense in self.senses:
            if sense.entity_id == sense_id:
                return sense
        return None
