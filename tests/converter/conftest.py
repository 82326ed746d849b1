from typing import Any

import pytest

from wikibase_datamodel import Datamodel, DatamodelConverter, ObjectFactory, Vocab
from wikibase_datamodel.models.internal_representation import Rank


class RecordingFactory(ObjectFactory):
    """Factory that remembers which models it constructed"""

    def __init__(self):
        self.created: list[str] = []

    def _create(self, model, **fields: Any):
        self.created.append(model.__name__)
        return super()._create(model, **fields)


@pytest.fixture
def target() -> RecordingFactory:
    return RecordingFactory()


@pytest.fixture
def converter(target: RecordingFactory) -> DatamodelConverter:
    return DatamodelConverter(target)


@pytest.fixture
def q42_item(dm: Datamodel):
    """Douglas Adams with terms, site links and qualified, referenced statements"""
    q42 = dm.make_wikidata_item_id_value("Q42")
    p31 = dm.make_wikidata_property_id_value("P31")
    p69 = dm.make_wikidata_property_id_value("P69")
    p580 = dm.make_wikidata_property_id_value("P580")
    p248 = dm.make_wikidata_property_id_value("P248")
    p2048 = dm.make_wikidata_property_id_value("P2048")

    reference = dm.make_reference(
        [dm.make_snak_group([dm.make_value_snak(p248, dm.make_wikidata_item_id_value("Q5375741"))])]
    )
    s1 = dm.make_statement(
        q42,
        dm.make_value_snak(p31, dm.make_wikidata_item_id_value("Q5")),
        references=[reference],
        statement_id="Q42$F078E5B3",
    )
    s2 = dm.make_statement(
        q42,
        dm.make_value_snak(p69, dm.make_wikidata_item_id_value("Q691283")),
        qualifiers=[dm.make_snak_group([dm.make_value_snak(p580, dm.make_time_value(1971, 1, 1))])],
        rank=Rank.PREFERRED,
        statement_id="Q42$0E9C4724",
    )
    s3 = dm.make_statement(
        q42,
        dm.make_value_snak(
            p2048,
            dm.make_quantity_value(
                "1.96", "1.95", "1.97", dm.make_wikidata_item_id_value("Q11573")
            ),
        ),
        statement_id="Q42$2D71C2A9",
    )
    return dm.make_item_document(
        q42,
        labels=[
            dm.make_monolingual_text_value("Douglas Adams", "en"),
            dm.make_monolingual_text_value("Douglas Adams", "de"),
        ],
        descriptions=[dm.make_monolingual_text_value("English writer and humorist", "en")],
        aliases=[
            dm.make_monolingual_text_value("Foo", "en"),
            dm.make_monolingual_text_value("Foo2", "en"),
            dm.make_monolingual_text_value("Fuh", "de"),
        ],
        statement_groups=[
            dm.make_statement_group([s1]),
            dm.make_statement_group([s2]),
            dm.make_statement_group([s3]),
        ],
        site_links=[
            dm.make_site_link(
                "Douglas Adams", "enwiki", [dm.make_wikidata_item_id_value("Q17437796")]
            )
        ],
        revision_id=1234,
    )


@pytest.fixture
def sample_values(dm: Datamodel) -> list:
    """One instance of every value variant"""
    return [
        dm.make_wikidata_item_id_value("Q42"),
        dm.make_wikidata_property_id_value("P31"),
        dm.make_wikidata_lexeme_id_value("L7"),
        dm.make_wikidata_form_id_value("L7-F1"),
        dm.make_wikidata_sense_id_value("L7-S1"),
        dm.make_wikimedia_commons_media_info_id_value("M9"),
        dm.make_time_value(1952, 3, 11),
        dm.make_globe_coordinates_value(51.5, -0.1, 0.001, Vocab.GLOBE_EARTH),
        dm.make_string_value("Douglas Adams"),
        dm.make_monolingual_text_value("Douglas Adams", "en"),
        dm.make_quantity_value("42", "41", "43", dm.make_wikidata_item_id_value("Q11573")),
        dm.make_quantity_value("42"),
    ]
