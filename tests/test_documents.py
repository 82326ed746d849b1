import pytest

from wikibase_datamodel import ValidationError, Vocab


@pytest.fixture
def q42(dm):
    return dm.make_wikidata_item_id_value("Q42")


def test_item_document_groups_terms(dm, q42):
    """Test that flat term lists are keyed by language"""
    item = dm.make_item_document(
        q42,
        labels=[
            dm.make_monolingual_text_value("Douglas Adams", "en"),
            dm.make_monolingual_text_value("Douglas Adams", "de"),
        ],
        descriptions=[dm.make_monolingual_text_value("English writer", "en")],
        aliases=[
            dm.make_monolingual_text_value("Douglas Noël Adams", "en"),
            dm.make_monolingual_text_value("DNA", "en"),
            dm.make_monolingual_text_value("Douglas Noel Adams", "fr"),
        ],
    )
    assert list(item.labels) == ["en", "de"]
    assert item.labels["en"].text == "Douglas Adams"
    assert item.descriptions["en"].text == "English writer"
    assert [a.text for a in item.aliases["en"]] == ["Douglas Noël Adams", "DNA"]
    assert [a.text for a in item.aliases["fr"]] == ["Douglas Noel Adams"]
    assert item.revision_id == 0
    assert item.site_links == {}


def test_second_label_for_language_rejected(dm, q42):
    """Test at most one label per language"""
    with pytest.raises(ValidationError) as exc_info:
        dm.make_item_document(
            q42,
            labels=[
                dm.make_monolingual_text_value("Douglas Adams", "en"),
                dm.make_monolingual_text_value("DNA", "en"),
            ],
        )
    assert "'en'" in str(exc_info.value)


def test_second_site_link_for_site_rejected(dm, q42):
    """Test at most one site link per site"""
    with pytest.raises(ValidationError):
        dm.make_item_document(
            q42,
            site_links=[
                dm.make_site_link("Douglas Adams", "enwiki"),
                dm.make_site_link("Douglas_Adams", "enwiki"),
            ],
        )


def test_item_document_site_links(dm, q42):
    """Test site links keyed by site key"""
    item = dm.make_item_document(
        q42,
        site_links=[dm.make_site_link("Douglas Adams", "enwiki")],
        revision_id=1234,
    )
    assert item.site_links["enwiki"].page_title == "Douglas Adams"
    assert item.revision_id == 1234


def test_negative_revision_id_rejected(dm, q42):
    """Test that revision ids are not negative"""
    with pytest.raises(ValidationError):
        dm.make_item_document(q42, revision_id=-1)


def test_entity_id_must_match_document_kind(dm):
    """Test that an item document needs an item id"""
    with pytest.raises(ValidationError):
        dm.make_item_document(dm.make_wikidata_property_id_value("P31"))


def test_statement_lookup(dm, q42):
    """Test finding statement groups by property"""
    p31 = dm.make_wikidata_property_id_value("P31")
    p21 = dm.make_wikidata_property_id_value("P21")
    group = dm.make_statement_group(
        [dm.make_statement(q42, dm.make_value_snak(p31, dm.make_wikidata_item_id_value("Q5")))]
    )
    item = dm.make_item_document(q42, statement_groups=[group])
    assert item.find_statement_group(p31) == group
    assert item.find_statement_group("P31") == group
    assert item.has_statement("P31")
    assert not item.has_statement(p21)
    assert item.all_statements() == list(group.statements)


def test_with_revision_id_returns_new_document(dm, q42):
    """Test that editing produces a new document"""
    item = dm.make_item_document(q42)
    edited = item.with_revision_id(42)
    assert edited.revision_id == 42
    assert item.revision_id == 0
    with pytest.raises(ValidationError):
        item.with_revision_id(-3)


def test_with_label_replaces_language(dm, q42):
    """Test label override keeps at most one label per language"""
    item = dm.make_item_document(q42, labels=[dm.make_monolingual_text_value("Douglas", "en")])
    edited = item.with_label(dm.make_monolingual_text_value("Douglas Adams", "en"))
    assert edited.labels["en"].text == "Douglas Adams"
    assert item.labels["en"].text == "Douglas"


def test_property_document(dm):
    """Test property document with datatype"""
    p31 = dm.make_wikidata_property_id_value("P31")
    document = dm.make_property_document(
        p31,
        dm.make_datatype_id_value(Vocab.DT_ITEM),
        labels=[dm.make_monolingual_text_value("instance of", "en")],
    )
    assert document.entity_id == p31
    assert document.datatype.iri == Vocab.DT_ITEM
    assert document.labels["en"].text == "instance of"


def test_lexeme_document_with_forms_and_senses(dm):
    """Test lexeme with nested forms and senses"""
    noun = dm.make_wikidata_item_id_value("Q1084")
    english = dm.make_wikidata_item_id_value("Q1860")
    plural = dm.make_wikidata_item_id_value("Q146786")
    form = dm.make_form_document(
        dm.make_wikidata_form_id_value("L7-F1"),
        [dm.make_monolingual_text_value("cats", "en")],
        [plural],
    )
    sense = dm.make_sense_document(
        dm.make_wikidata_sense_id_value("L7-S1"),
        [dm.make_monolingual_text_value("small domesticated carnivorous mammal", "en")],
    )
    lexeme = dm.make_lexeme_document(
        dm.make_wikidata_lexeme_id_value("L7"),
        noun,
        english,
        [dm.make_monolingual_text_value("cat", "en")],
        forms=[form],
        senses=[sense],
    )
    assert lexeme.lemmas["en"].text == "cat"
    assert lexeme.lexical_category == noun
    assert lexeme.language == english
    assert lexeme.forms == (form,)
    assert lexeme.find_form(form.entity_id) == form
    assert lexeme.find_sense(sense.entity_id) == sense
    assert form.representations["en"].text == "cats"
    assert form.grammatical_features == (plural,)
    assert lexeme.labels == {}


def test_second_lemma_for_language_rejected(dm):
    """Test at most one lemma per language"""
    with pytest.raises(ValidationError):
        dm.make_lexeme_document(
            dm.make_wikidata_lexeme_id_value("L7"),
            dm.make_wikidata_item_id_value("Q1084"),
            dm.make_wikidata_item_id_value("Q1860"),
            [
                dm.make_monolingual_text_value("cat", "en"),
                dm.make_monolingual_text_value("kitty", "en"),
            ],
        )


def test_media_info_document(dm):
    """Test media info document with labels"""
    m9 = dm.make_wikimedia_commons_media_info_id_value("M9")
    document = dm.make_media_info_document(
        m9, labels=[dm.make_monolingual_text_value("A cat", "en")]
    )
    assert document.entity_id == m9
    assert document.labels["en"].text == "A cat"
    assert document.statement_groups == ()


def test_term_mappings_are_read_only(dm, q42):
    """Test documents cannot be changed through their mappings"""
    item = dm.make_item_document(
        q42,
        labels=[dm.make_monolingual_text_value("Douglas Adams", "en")],
        aliases=[dm.make_monolingual_text_value("DNA", "en")],
        site_links=[dm.make_site_link("Douglas Adams", "enwiki")],
    )
    with pytest.raises(TypeError):
        item.labels["en"] = dm.make_monolingual_text_value("Someone else", "en")
    with pytest.raises(TypeError):
        item.aliases["de"] = ()
    with pytest.raises(TypeError):
        item.site_links["dewiki"] = dm.make_site_link("Douglas Adams", "dewiki")
    with pytest.raises(TypeError):
        dm.make_item_document(q42).descriptions["en"] = None


def test_edited_copy_does_not_share_mappings(dm, q42):
    """Test an edited document is independent of its source"""
    item = dm.make_item_document(q42, labels=[dm.make_monolingual_text_value("A", "en")])
    newer = item.with_revision_id(7)
    assert newer.labels is not item.labels
    assert newer.labels == item.labels
    with pytest.raises(TypeError):
        newer.labels["en"] = dm.make_monolingual_text_value("B", "en")
    assert item.labels["en"].text == "A"


def test_lexeme_mappings_are_read_only(dm):
    """Test lemmas, representations and glosses are read-only"""
    form = dm.make_form_document(
        dm.make_wikidata_form_id_value("L7-F1"), [dm.make_monolingual_text_value("cats", "en")], []
    )
    sense = dm.make_sense_document(
        dm.make_wikidata_sense_id_value("L7-S1"), [dm.make_monolingual_text_value("feline", "en")]
    )
    lexeme = dm.make_lexeme_document(
        dm.make_wikidata_lexeme_id_value("L7"),
        dm.make_wikidata_item_id_value("Q1084"),
        dm.make_wikidata_item_id_value("Q1860"),
        [dm.make_monolingual_text_value("cat", "en")],
    )
    for mapping in (form.representations, sense.glosses, lexeme.lemmas):
        with pytest.raises(TypeError):
            mapping["fr"] = None


def test_negative_revision_edit_raises_validation_error(dm, q42):
    """Test edits report failures as validation errors"""
    with pytest.raises(ValidationError) as exc_info:
        dm.make_item_document(q42).with_revision_id(-1)
    assert exc_info.value.model == "ItemDocument"
    assert "revision_id" in str(exc_info.value)


def test_document_dump_has_plain_dicts(dm, q42):
    """Test serialization turns read-only mappings into dicts"""
    item = dm.make_item_document(q42, labels=[dm.make_monolingual_text_value("A", "en")])
    dumped = item.model_dump()
    assert type(dumped["labels"]) is dict
    assert dumped["labels"]["en"]["text"] == "A"
    assert dumped["site_links"] == {}


def test_statement_lookup_respects_site(dm, q42):
    """Test looking up a property of another site finds nothing"""
    p31 = dm.make_wikidata_property_id_value("P31")
    group = dm.make_statement_group([dm.make_statement(q42, dm.make_some_value_snak(p31))])
    item = dm.make_item_document(q42, statement_groups=[group])
    assert item.find_statement_group(dm.make_property_id_value("P31", "https://wiki.example.org/entity/")) is None
    assert item.find_statement_group(p31) == group
