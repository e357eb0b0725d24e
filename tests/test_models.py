"""
Tests for resource record models.
"""

import pytest

from resource_docgen.exceptions import InvalidResourceRecordError
from resource_docgen.models import (
    PropertyRecord,
    format_default_value,
    parse_resource_record,
)


class TestParseResourceRecord:
    """Test cases for parse_resource_record."""

    def test_wire_aliases(self, service_data):
        record = parse_resource_record("service", service_data)
        assert record.identifier == "service"
        assert record.introduced_in_version == "12.0"
        assert record.first_default_action == "nothing"
        service_name = next(p for p in record.properties if p.name == "service_name")
        assert service_name.is_name_property is True
        assert service_name.accepted_types == ["String"]
        pattern = next(p for p in record.properties if p.name == "pattern")
        assert pattern.is_deprecated is True
        assert pattern.accepted_types == ["String", None]

    def test_input_order_preserved(self, widget_record):
        assert [p.name for p in widget_record.properties] == ["size", "name"]

    def test_missing_actions_is_fatal(self):
        with pytest.raises(InvalidResourceRecordError) as exc_info:
            parse_resource_record("broken", {"properties": []})
        assert "actions" in exc_info.value.message
        assert exc_info.value.context["resource_name"] == "broken"

    def test_non_mapping_is_fatal(self):
        with pytest.raises(InvalidResourceRecordError):
            parse_resource_record("broken", ["create"])

    def test_optional_fields_default(self):
        record = parse_resource_record("bare", {"actions": ["run"]})
        assert record.description is None
        assert record.properties == []
        assert record.default_action == ["nothing"]
        assert record.examples is None

    def test_null_types_become_empty(self):
        record = parse_resource_record(
            "bare", {"actions": ["run"], "properties": [{"name": "x", "is": None}]}
        )
        assert record.properties[0].accepted_types == []

    def test_records_are_frozen(self, widget_record):
        with pytest.raises(Exception):
            widget_record.identifier = "other"


class TestPropertyRecord:
    """Test cases for PropertyRecord helpers."""

    def test_literal_default(self):
        assert PropertyRecord(name="size", default="10").has_literal_default

    def test_lazy_default_is_not_literal(self):
        assert not PropertyRecord(name="path", default="lazy default").has_literal_default

    def test_false_default_is_literal(self):
        assert PropertyRecord(name="force", default=False).has_literal_default


class TestFormatDefaultValue:
    """Test cases for format_default_value."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("0644", "0644"),
            (True, "true"),
            (False, "false"),
            (10, "10"),
            (["a", "b"], '["a", "b"]'),
            ({"restart": None}, '{"restart": null}'),
        ],
    )
    def test_values(self, value, expected):
        assert format_default_value(value) == expected
