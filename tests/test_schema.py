import pytest

from university_data.schema import SchemaExtractor, TypeMapper


def test_infer_fields_priority_order() -> None:
    sample = {"name": "Foo U", "enrollment_date": "2020-01-01", "objectid": "5"}

    fields = SchemaExtractor().infer_fields(sample)

    assert [field.model_dump() for field in fields] == [
        {"name": "name", "type": "string", "description": "name"},
        {"name": "enrollment_date", "type": "date", "description": "enrollment date"},
        {"name": "objectid", "type": "number", "description": "objectid"},
    ]


def test_date_name_wins_over_numeric_value() -> None:
    assert TypeMapper.infer_type("sourcedate", "20190101") == "date"
    assert TypeMapper.infer_type("update_time", 1577836800) == "date"


def test_description_replaces_every_underscore() -> None:
    assert SchemaExtractor.describe("tot_enroll_ment") == "tot enroll ment"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (5, "number"),
        (3.25, "number"),
        ("  42 ", "number"),
        ("-1.5e3", "number"),
        ("Fresno", "string"),
        ("NaN", "string"),
        ("", "string"),
        (True, "boolean"),
        ({"lat": 1.0, "lon": 2.0}, "object"),
        (["a"], "array"),
        (None, "null"),
    ],
)
def test_infer_type_from_value(value, expected) -> None:
    assert TypeMapper.infer_type("field", value) == expected


def test_field_order_follows_sample() -> None:
    sample = {"zip": "94305", "address": "450 Serra Mall", "city": "Stanford"}

    names = [field.name for field in SchemaExtractor().infer_fields(sample)]

    assert names == ["zip", "address", "city"]
