"""
Tests for formatter module.
"""

import pytest

from resource_docgen.formatter import (
    bolded_description,
    bolded_friendly_list,
    friendly_properties_sentence,
    friendly_types_list,
    generate_resource_block,
    largest_property_name,
    property_comment,
)
from resource_docgen.models import PropertyRecord


def prop(name, **kwargs):
    return PropertyRecord(name=name, **kwargs)


class TestLargestPropertyName:
    """Test cases for largest_property_name."""

    def test_empty(self):
        assert largest_property_name([]) == 0

    def test_longest_name_wins(self):
        props = [prop("a"), prop("recursive"), prop("mode")]
        assert largest_property_name(props) == len("recursive")


class TestFriendlyTypesList:
    """Test cases for friendly_types_list."""

    def test_literal_types_kept_verbatim(self):
        assert friendly_types_list(["String", "Array", "Integer"]) == "String, Array, Integer"

    def test_sentinels_substituted(self):
        assert friendly_types_list(["String", None, "TrueClass", "FalseClass"]) == (
            "String, nil, true, false"
        )

    @pytest.mark.parametrize("value", [None, []])
    def test_empty_input(self, value):
        assert friendly_types_list(value) == ""


class TestBoldedFriendlyList:
    """Test cases for bolded_friendly_list and its sentence form."""

    def test_single_item(self):
        assert bolded_friendly_list(["mode"]) == "``mode``"

    def test_two_items(self):
        assert bolded_friendly_list(["group", "mode"]) == "``group`` and ``mode``"

    def test_three_items(self):
        assert bolded_friendly_list(["group", "mode", "owner"]) == (
            "``group``, ``mode``, and ``owner``"
        )

    def test_does_not_mutate_input(self):
        names = ["group", "mode", "owner"]
        bolded_friendly_list(names)
        assert names == ["group", "mode", "owner"]

    def test_sentence_empty(self):
        assert friendly_properties_sentence([]) is None

    def test_sentence_singular(self):
        assert friendly_properties_sentence(["size"]) == (
            "``size`` is the property available to this resource."
        )

    def test_sentence_plural(self):
        assert friendly_properties_sentence(["group", "mode"]) == (
            "``group`` and ``mode`` are the properties available to this resource."
        )


class TestBoldedDescription:
    """Test cases for bolded_description."""

    def test_absent_description(self):
        assert bolded_description("service", None) is None

    def test_bolds_name_followed_by_space(self):
        assert bolded_description("service", "service starts and stops") == (
            "**service** starts and stops"
        )

    def test_does_not_bold_inside_longer_word(self):
        assert bolded_description("user", "update username field") == (
            "update username field"
        )

    def test_bolds_every_guarded_occurrence(self):
        assert bolded_description("file", "Use the file resource; a file is ok") == (
            "Use the **file** resource; a **file** is ok"
        )

    def test_trailing_occurrence_left_alone(self):
        assert bolded_description("widget", "widget manages a widget") == (
            "**widget** manages a widget"
        )


class TestPropertyComment:
    """Test cases for property_comment."""

    def test_literal_default(self):
        assert property_comment(prop("size", default="10")) == " # default value: 10"

    def test_boolean_default(self):
        assert property_comment(prop("force", default=False)) == " # default value: false"

    def test_lazy_default_hidden(self):
        assert property_comment(prop("path", default="lazy default")) == ""

    def test_name_property(self):
        assert property_comment(prop("path", name_property=True)) == (
            " # default value: 'name' unless specified"
        )

    def test_no_default(self):
        assert property_comment(prop("owner")) == ""


class TestGenerateResourceBlock:
    """Test cases for generate_resource_block."""

    def test_widget_block(self):
        props = [prop("name", **{"is": ["String"]}), prop("size", **{"is": ["Integer"]}, default="10")]
        block = generate_resource_block("widget", props, ["create"])
        assert block == (
            "  widget 'name' do\n"
            "    size      Integer # default value: 10\n"
            "    action    # defaults to :create if not specified\n"
            "  end"
        )

    def test_no_properties(self):
        block = generate_resource_block("log", [], ["write"])
        assert block == (
            "  log 'name' do\n"
            "    action # defaults to :write if not specified\n"
            "  end"
        )

    def test_name_property_excluded(self):
        block = generate_resource_block("thing", [prop("name")], ["run"])
        assert "    name" not in block

    def test_columns_align(self):
        props = [prop("a", **{"is": ["String"]}), prop("longer", **{"is": ["Integer"]})]
        lines = generate_resource_block("thing", props, ["run"]).splitlines()[1:-1]
        starts = {len(line) - len(line[4:].split(" ", 1)[1].lstrip()) for line in lines}
        assert starts == {4 + len("longer") + 6}
