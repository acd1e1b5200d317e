"""Tests for the typed option store."""

import tempfile
from pathlib import Path

import pytest

from bookoptions.options import BookOptions, parse_char, parse_i32
from bookoptions.schema.core import OptionDefinition, OptionType, SectionMarker
from bookoptions.schema.parser import schema_entries
from bookoptions.schema.values import OptionValue
from bookoptions.shared.errors import (
    InvalidPathError,
    OptionNotPresentError,
    ParseError,
    SchemaError,
    UnrecognizedKeyError,
    WrongTypeError,
)


class TestConstruction:
    """Test building a store from the schema."""

    def test_every_key_in_exactly_one_set(self, options):
        for entry in schema_entries():
            if isinstance(entry, SectionMarker):
                continue
            memberships = [t for t, keys in options.valid_keys.items() if entry.key in keys]
            assert memberships == [entry.option_type]

    def test_valid_sets_are_disjoint(self, options):
        total = sum(len(keys) for keys in options.valid_keys.values())
        union = set().union(*options.valid_keys.values())
        assert total == len(union)

    def test_defaults(self, options):
        assert options.get_str("lang") == "en"
        assert options.get_str("author") == "Anonymous"
        assert options.get_str("numbering_template") == "{{number}}. {{title}}"
        assert options.get_i32("numbering") == 1
        assert options.get_i32("epub.version") == 2
        assert options.get_bool("display_toc") is False
        assert options.get_bool("autoclean") is True
        assert options.get_char("nb_char") == " "

    def test_options_without_default_are_absent(self, options):
        assert "cover" not in options
        assert "subject" not in options
        with pytest.raises(OptionNotPresentError):
            options.get("cover")

    def test_temp_dir_from_environment(self, options):
        assert options.get_relative_path("temp_dir") == tempfile.gettempdir()
        assert options.get_path("temp_dir")

    def test_temp_dir_ignores_schema_default(self, monkeypatch):
        monkeypatch.setattr(tempfile, "tempdir", "/custom/tmp")
        entries = [OptionDefinition("Temporary directory", "temp_dir", OptionType.PATH, "/ignored")]

        options = BookOptions(entries)

        assert options.get_relative_path("temp_dir") == "/custom/tmp"

    def test_temp_dir_without_schema_default(self, monkeypatch):
        monkeypatch.setattr(tempfile, "tempdir", "/custom/tmp")
        options = BookOptions([OptionDefinition("", "temp_dir", OptionType.PATH)])

        assert options.get_relative_path("temp_dir") == "/custom/tmp"

    def test_duplicate_key_across_types(self):
        entries = [
            OptionDefinition("", "k", OptionType.STRING),
            OptionDefinition("", "k", OptionType.INTEGER, "x"),
        ]

        with pytest.raises(SchemaError) as exc_info:
            BookOptions(entries)

        assert "duplicate key 'k'" in str(exc_info.value)
        assert exc_info.value.details == {"key": "k"}

    def test_duplicate_key_same_type(self):
        entries = [
            OptionDefinition("", "k", OptionType.BOOLEAN, "true"),
            OptionDefinition("", "k", OptionType.BOOLEAN, "false"),
        ]

        with pytest.raises(SchemaError):
            BookOptions(entries)

    def test_invalid_default_aborts_construction(self):
        entries = [OptionDefinition("A count", "count", OptionType.INTEGER, "many")]

        with pytest.raises(SchemaError) as exc_info:
            BookOptions(entries)

        assert isinstance(exc_info.value.__cause__, ParseError)
        assert exc_info.value.details == {"key": "count", "default": "many"}

    def test_root_defaults_to_empty_path(self, options):
        assert options.root == Path()

    def test_root_accepts_string(self):
        options = BookOptions(root="/books/mybook")
        assert options.root == Path("/books/mybook")


class TestSet:
    """Test setting options from text."""

    def test_set_string(self, options):
        options.set("author", "Joan Doe")
        assert options.get_str("author") == "Joan Doe"

    def test_set_string_is_verbatim(self, options):
        options.set("title", "  spaced: #1  ")
        assert options.get_str("title") == "  spaced: #1  "

    def test_set_int(self, options):
        options.set("numbering", "2")
        assert options.get_i32("numbering") == 2

    def test_set_bool(self, options):
        options.set("display_toc", "true")
        assert options.get_bool("display_toc") is True

    def test_set_char(self, options):
        options.set("nb_char", "'~'")
        assert options.get_char("nb_char") == "~"

    def test_set_char_space(self, options):
        options.set("nb_char", "' '")
        assert options.get_char("nb_char") == " "

    def test_set_path(self, options):
        options.set("cover", "img/c.png")
        assert options.get_relative_path("cover") == "img/c.png"

    def test_set_replaces_value(self, options):
        options.set("author", "First")
        options.set("author", "Second")
        assert options.get("author") == OptionValue(OptionType.STRING, "Second")

    def test_unrecognized_key(self, options):
        with pytest.raises(UnrecognizedKeyError) as exc_info:
            options.set("autor", "John Smith")

        assert exc_info.value.key == "autor"
        assert "unrecognized key" in str(exc_info.value)
        assert "autor" not in options

    def test_bad_bool_keeps_previous_value(self, options):
        with pytest.raises(ParseError) as exc_info:
            options.set("autoclean", "notabool")

        assert exc_info.value.reason == "could not parse bool"
        assert exc_info.value.details == {
            "key": "autoclean",
            "value": "notabool",
            "reason": "could not parse bool",
        }
        assert options.get_bool("autoclean") is True

    def test_bool_is_case_sensitive(self, options):
        with pytest.raises(ParseError):
            options.set("verbose", "True")

    def test_bad_int_keeps_previous_value(self, options):
        options.set("numbering", "3")
        with pytest.raises(ParseError) as exc_info:
            options.set("numbering", "foo")

        assert "could not parse int" in str(exc_info.value)
        assert options.get_i32("numbering") == 3

    def test_bad_char(self, options):
        with pytest.raises(ParseError) as exc_info:
            options.set("nb_char", "xx")

        assert exc_info.value.reason == "could not parse char"
        assert options.get_char("nb_char") == " "

    def test_bad_value_for_unset_key_stays_absent(self):
        options = BookOptions([OptionDefinition("", "count", OptionType.INTEGER)])

        with pytest.raises(ParseError):
            options.set("count", "1.5")

        assert "count" not in options


class TestLiteralParsing:
    """Test the literal grammars for char and int values."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("'a'", "a"),
            ("  'b'  ", "b"),
            ("'é'", "é"),
            ("xx", None),
            ("''", None),
            ("'ab'", None),
            ("'''", None),
            ("a'b'", None),
        ],
    )
    def test_parse_char(self, raw, expected):
        assert parse_char(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("0", 0),
            ("-5", -5),
            ("+3", 3),
            ("2147483647", 2147483647),
            ("-2147483648", -2147483648),
            ("2147483648", None),
            ("-2147483649", None),
            (" 3", None),
            ("3_0", None),
            ("1.0", None),
            ("", None),
            ("٣", None),
        ],
    )
    def test_parse_i32(self, raw, expected):
        assert parse_i32(raw) == expected


class TestAccessors:
    """Test typed accessors and path resolution."""

    def test_wrong_accessor(self, options):
        with pytest.raises(WrongTypeError) as exc_info:
            options.get_bool("author")

        assert str(exc_info.value) == "String('Anonymous') is not a bool"
        assert exc_info.value.expected == "bool"

    def test_path_accessor_on_string(self, options):
        with pytest.raises(WrongTypeError):
            options.get_path("author")
        with pytest.raises(WrongTypeError):
            options.get_relative_path("author")

    def test_string_accessor_on_path(self, options):
        options.set("cover", "img/c.png")
        with pytest.raises(WrongTypeError):
            options.get_str("cover")

    def test_int_accessor_on_char(self, options):
        with pytest.raises(WrongTypeError):
            options.get_i32("nb_char")

    def test_get_path_joins_root(self, options):
        options.root = "/books/mybook"
        options.set("cover", "img/c.png")

        assert options.get_path("cover") == str(Path("/books/mybook") / "img/c.png")
        assert options.get_relative_path("cover") == "img/c.png"

    def test_get_path_without_root(self, options):
        options.set("cover", "img/c.png")
        assert options.get_path("cover") == "img/c.png"

    def test_get_path_not_present(self, options):
        with pytest.raises(OptionNotPresentError) as exc_info:
            options.get_path("html.css")

        assert exc_info.value.key == "html.css"
        assert "option html.css is not present" in str(exc_info.value)

    def test_get_path_not_representable(self, options):
        options.set("cover", "\udcff.png")

        with pytest.raises(InvalidPathError) as exc_info:
            options.get_path("cover")

        assert exc_info.value.key == "cover"
        assert options.get_relative_path("cover") == "\udcff.png"


class TestIntrospection:
    """Test helpers for inspecting the store."""

    def test_option_type(self, options):
        assert options.option_type("cover") is OptionType.PATH
        assert options.option_type("autor") is None

    def test_is_valid_key(self, options):
        assert options.is_valid_key("output.epub")
        assert not options.is_valid_key("output.docx")

    def test_keys_and_to_dict(self, options):
        options.set("subject", "Fiction")

        assert "subject" in options.keys()
        assert "cover" not in options.keys()
        values = options.to_dict()
        assert values["subject"] == "Fiction"
        assert values["numbering"] == 1
        assert set(options) == set(values)

    def test_repr(self, options):
        assert "BookOptions(root=" in repr(options)
        assert "Integer(1)" in repr(options)
