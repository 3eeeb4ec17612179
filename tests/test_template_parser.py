"""Tests for the .fpst template parser."""

from datetime import datetime

import pytest

from scriptforge.core.services.template_parser import (
    DEFAULT_EXTENSION,
    extract_placeholders,
    parse_template,
    strip_directives,
)

THIS_YEAR = str(datetime.now().year)


class TestParseTemplate:

    def test_empty_document_yields_nothing(self):
        assert parse_template("", "Empty.fpst") is None

    def test_plain_template_gets_defaults(self):
        descriptor = parse_template("// ##Year##\nclass ##ClassName## {}\n", "Plain.fpst")

        assert descriptor.placeholders == {"ClassName": "", "Year": THIS_YEAR}
        assert descriptor.directives == {"EXTENSION": DEFAULT_EXTENSION}
        assert descriptor.menu_label == "Plain"
        assert descriptor.priority == 0

    def test_class_name_registered_even_when_absent(self):
        descriptor = parse_template("just text", "Notes.fpst")

        assert descriptor.placeholders == {"ClassName": ""}
        assert descriptor.body == "just text"

    def test_directive_is_captured_and_removed(self):
        raw = "&&extension = .txt&&\nHello ##ClassName##\n"
        descriptor = parse_template(raw, "Text.fpst")

        assert descriptor.directives["EXTENSION"] == ".txt"
        assert "&&" not in descriptor.body
        assert descriptor.body == "Hello ##ClassName##\n"

    def test_directive_value_is_trimmed(self):
        descriptor = parse_template("&&MENUNAME = Game Script   &&\nbody", "x.fpst")

        assert descriptor.menu_label == "Game Script"

    def test_first_duplicate_directive_wins(self):
        raw = "&&EXTENSION=.cs&&\n&&EXTENSION=.txt&&\nbody"
        descriptor = parse_template(raw, "Dup.fpst")

        assert descriptor.directives["EXTENSION"] == ".cs"
        assert descriptor.body == "body"

    @pytest.mark.parametrize(
        "value",
        ["C# Script", "Editor/Window", "Tools 2"],
    )
    def test_menu_name_charset(self, value):
        descriptor = parse_template(f"&&MENUNAME={value}&&\nbody", "fallback.fpst")

        assert descriptor.menu_label == value

    def test_menu_label_falls_back_to_file_stem(self):
        descriptor = parse_template("body", "Assets/ScriptTemplates/Editor Window.fpst")

        assert descriptor.menu_label == "Editor Window"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("&&PRIORITY=10&&\nbody", 10),
            ("&&priority = 3&&\nbody", 3),
            ("&&PRIORITY=high&&\nbody", 0),
            ("body", 0),
        ],
    )
    def test_priority(self, raw, expected):
        assert parse_template(raw, "p.fpst").priority == expected

    def test_placeholders_registered_once_in_order(self):
        descriptor = parse_template("##B## ##A## ##B## ##ClassName##", "Order.fpst")

        assert list(descriptor.placeholders) == ["ClassName", "B", "A"]

    def test_malformed_markup_is_ignored(self):
        raw = "&&KEY=&&\n##not a key## &&=value&&\n"
        descriptor = parse_template(raw, "Broken.fpst")

        assert descriptor.directives == {"EXTENSION": DEFAULT_EXTENSION}
        assert descriptor.placeholders == {"ClassName": ""}
        assert descriptor.body == raw

    def test_custom_default_extension_and_year(self):
        descriptor = parse_template(
            "##Year##", "y.fpst", default_extension=".py", year=1999
        )

        assert descriptor.extension == ".py"
        assert descriptor.placeholders["Year"] == "1999"

    def test_year_is_not_editable(self):
        descriptor = parse_template("##Year## ##Author##", "y.fpst")

        assert descriptor.editable_keys == ["ClassName", "Author"]


class TestStripDirectives:

    def test_second_pass_is_a_no_op(self):
        raw = "&&EXTENSION=.cs&&\n&&MENUNAME=Thing&&\nclass ##ClassName## {}\n"
        stripped, directives = strip_directives(raw)

        assert directives == {"EXTENSION": ".cs", "MENUNAME": "Thing"}
        assert strip_directives(stripped) == (stripped, {})

    def test_directive_without_trailing_newline(self):
        stripped, directives = strip_directives("&&EXTENSION=.js&&")

        assert stripped == ""
        assert directives == {"EXTENSION": ".js"}

    def test_spliced_directive_is_stripped_too(self):
        stripped, directives = strip_directives("&&A=&&B=c&&\nd&&\nbody")

        assert stripped == "body"
        assert directives == {"B": "c", "A": "d"}
        assert strip_directives(stripped) == (stripped, {})

    def test_first_value_wins_across_passes(self):
        raw = "&&A=&&B=c&&\nd&&\n&&A=first&&\nbody"
        stripped, directives = strip_directives(raw)

        assert directives["A"] == "first"
        assert stripped == "body"


class TestExtractPlaceholders:

    def test_year_filled(self):
        assert extract_placeholders("##Year##", year=2024) == {
            "ClassName": "",
            "Year": "2024",
        }

    def test_class_name_stays_first(self):
        placeholders = extract_placeholders("##Namespace## ##ClassName##")

        assert list(placeholders) == ["ClassName", "Namespace"]
