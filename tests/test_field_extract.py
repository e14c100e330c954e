from app.normalizers import (
    LookupValue, NullValue, ScalarValue, SequenceValue, display_value, extract, parse_field,
)

def test_parse_field_shapes():
    assert parse_field(None) == NullValue()
    assert parse_field("x") == ScalarValue("x")
    assert parse_field({"display_value": "A", "ID": "1"}) == LookupValue(display_value="A")
    assert parse_field([1, None]) == SequenceValue((ScalarValue(1), NullValue()))
    # unknown shapes degrade instead of raising
    assert parse_field(object()) == NullValue()

def test_lookup_prefers_display_value():
    raw = {"display_value": "Awning", "value": "awning-raw", "ID": "4471000001"}
    assert display_value(raw) == "Awning"

def test_lookup_falls_back_to_value_never_id():
    assert display_value({"value": "Blue", "ID": "99"}) == "Blue"
    assert display_value({"ID": "99"}) == ""
    assert display_value({"display_value": None, "value": None}) == ""

def test_sequence_drops_empty_items():
    a = {"display_value": "White"}
    b = {"display_value": "Grey"}
    assert display_value([a, None, b]) == display_value([a, b]) == "White, Grey"
    assert display_value([None, "", {"ID": "1"}]) == ""
    assert display_value([]) == ""

def test_falsy_scalars_are_empty():
    assert display_value(0) == ""
    assert display_value(0.0) == ""
    assert display_value(False) == ""
    assert display_value("") == ""

def test_scalar_formatting():
    assert display_value(True) == "true"
    assert display_value(3.0) == "3"
    assert display_value(4.5) == "4.5"
    assert display_value(12) == "12"

def test_extract_is_idempotent_on_strings():
    once = display_value([{"display_value": "A"}, "B"])
    assert extract(ScalarValue(once)) == once
