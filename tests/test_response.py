"""Tests for pulling candidate materials out of free-form model replies."""
from bim_schedule.ingestion.response import extract_json_array, fallback_material, parse_materials


def test_parse_materials_ignores_surrounding_prose():
    reply = (
        "Here is the schedule you asked for:\n"
        '[{"finish": "Oak Flooring", "area": "Kitchen"},\n'
        ' {"finish": "Marble Hearth", "pricePerSqm": {"low": 70, "mid": 100, "high": 150}}]\n'
        "Let me know if you need anything else."
    )

    candidates = parse_materials(reply)

    assert [candidate["finish"] for candidate in candidates] == ["Oak Flooring", "Marble Hearth"]
    assert candidates[1]["pricePerSqm"]["high"] == 150


def test_extract_json_array_spans_first_to_last_bracket():
    assert extract_json_array("a [1] b [2] c") == "[1] b [2]"
    assert extract_json_array("no array here") is None
    assert extract_json_array(None) is None


def test_reply_without_array_yields_single_fallback(caplog):
    caplog.set_level("WARNING")

    candidates = parse_materials("I'm sorry, I can't identify materials in this image.")

    assert candidates == [fallback_material()]
    assert "did not contain a JSON array" in caplog.text


def test_invalid_json_yields_single_fallback(caplog):
    caplog.set_level("WARNING")

    candidates = parse_materials("[{'finish': 'Oak'}, ]")

    assert candidates == [fallback_material()]
    assert "Failed to decode" in caplog.text


def test_empty_reply_yields_fallback():
    assert parse_materials("") == [fallback_material()]


def test_empty_array_is_an_empty_list():
    assert parse_materials("Nothing found: []") == []


def test_non_object_entries_are_dropped(caplog):
    caplog.set_level("WARNING")

    candidates = parse_materials('[{"finish": "Oak"}, "Tile", 3, null]')

    assert candidates == [{"finish": "Oak"}]
    assert "Dropped 3 non-object entries" in caplog.text


def test_fallback_material_is_a_fresh_copy():
    first = fallback_material()
    first["finish"] = "changed"

    assert fallback_material()["finish"] == "Standard Grade"
    assert "pricePerSqm" not in fallback_material()


def test_integer_with_too_many_digits_yields_fallback(caplog):
    caplog.set_level("WARNING")
    reply = '[{"finish": "Oak", "pricePerSqm": {"low": ' + "1" * 5000 + "}}]"

    assert parse_materials(reply) == [fallback_material()]
    assert "Failed to decode" in caplog.text


def test_deeply_nested_array_yields_fallback():
    reply = "[" * 100000 + "]" * 100000

    assert parse_materials(reply) == [fallback_material()]
