import re
from typing import ClassVar

import pytest

from wikibase_datamodel import DatamodelConverter, UnsupportedVariant
from wikibase_datamodel.models.internal_representation import (
    EntityIdValue,
    Snak,
    UnsupportedValue,
    Value,
    ValueVisitor,
)


class HologramValue(Value):
    text: str


class EventIdValue(EntityIdValue):
    id_pattern: ClassVar[re.Pattern] = re.compile(r"^E[1-9][0-9]*$")


class ReferenceSnak(Snak):
    pass


def test_copy_values_equal_not_identical(converter, sample_values):
    """Test every value variant is re-created through the target factory"""
    for value in sample_values:
        copied = converter.copy_value(value)
        assert copied == value
        assert type(copied) is type(value)
        assert copied is not value


def test_copy_dispatches_values(converter, sample_values):
    """Test the generic copy entry point handles values"""
    assert [converter.copy(value) for value in sample_values] == sample_values


def test_copy_quantity_keeps_exact_decimals(dm, converter):
    """Test numeric values survive conversion exactly"""
    value = dm.make_quantity_value("1.00", "0.95", "1.05")
    copied = converter.copy_value(value)
    assert str(copied.numeric_value) == "1.00"
    assert str(copied.lower_bound) == "0.95"
    assert copied.unit is None


def test_copy_datatype_id_value(dm, converter):
    """Test datatype ids copy by IRI"""
    datatype = dm.make_datatype_id_value("http://wikiba.se/ontology#WikibaseItem")
    assert converter.copy(datatype) == datatype


def test_unsupported_value_passes_through(dm, converter, target):
    """Test opaque values are returned as they are"""
    value = dm.make_unsupported_value("geo-shape", {"value": "Data:Berlin.map"})
    assert converter.copy_value(value) is value
    assert "UnsupportedValue" not in target.created


def test_unknown_value_variant_rejected(converter):
    """Test a value type outside the closed set fails"""
    with pytest.raises(UnsupportedVariant) as exc_info:
        converter.copy_value(HologramValue(text="nope"))
    assert exc_info.value.variant is HologramValue
    assert "HologramValue" in str(exc_info.value)


def test_unknown_entity_id_variant_rejected(converter):
    """Test an entity id kind without a copy operation fails"""
    with pytest.raises(UnsupportedVariant) as exc_info:
        converter.copy_value(EventIdValue(id="E1", site_iri="https://events.example.org/"))
    assert "EventIdValue" in str(exc_info.value)


def test_unknown_snak_variant_rejected(dm, converter):
    """Test a snak type outside the closed set fails"""
    snak = ReferenceSnak(property_id=dm.make_wikidata_property_id_value("P1"))
    with pytest.raises(UnsupportedVariant) as exc_info:
        converter.copy_snak(snak)
    assert "ReferenceSnak" in str(exc_info.value)


def test_non_model_object_rejected(converter):
    """Test copying something that is not a model object"""
    with pytest.raises(UnsupportedVariant):
        converter.copy(object())
    with pytest.raises(UnsupportedVariant):
        converter.copy_value("Q42")


def test_incomplete_visitor_cannot_be_instantiated():
    """Test a visitor must handle every value variant"""

    class StringsOnly(ValueVisitor[str]):
        def visit_string_value(self, value):
            return value.text

    with pytest.raises(TypeError):
        StringsOnly()


def test_custom_value_visitor(sample_values, dm):
    """Test double dispatch reaches the matching visit method"""

    class KindNames(ValueVisitor[str]):
        def visit_entity_id_value(self, value):
            return value.entity_type.value

        def visit_globe_coordinates_value(self, value):
            return "globe"

        def visit_monolingual_text_value(self, value):
            return "monolingual"

        def visit_quantity_value(self, value):
            return "quantity"

        def visit_string_value(self, value):
            return "string"

        def visit_time_value(self, value):
            return "time"

        def visit_unsupported_value(self, value):
            return value.value_type

    visitor = KindNames()
    names = [value.accept(visitor) for value in sample_values]
    assert names[6:] == ["time", "globe", "string", "monolingual", "quantity", "quantity"]
    assert dm.make_unsupported_value("geo-shape").accept(visitor) == "geo-shape"


def test_converter_is_a_value_visitor(converter):
    assert isinstance(converter, ValueVisitor)
    assert isinstance(converter, DatamodelConverter)
    value = UnsupportedValue(value_type="tabular-data", contents=None)
    assert converter.visit_unsupported_value(value) is value
