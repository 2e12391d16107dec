"""Tests for identifier sanitization and documentation escaping."""

import pytest

from resx_generator.codegen.core.errors import IdentifierCollisionError
from resx_generator.codegen.core.naming import (
    IdentifierSanitizer,
    escape_xml_documentation,
)
from resx_generator.codegen.core.resources import ResourceEntry
from resx_generator.codegen.languages.csharp.naming import create_csharp_sanitizer
from resx_generator.codegen.languages.python.naming import (
    create_python_sanitizer,
    escape_docstring,
)


@pytest.fixture
def sanitizer():
    return create_csharp_sanitizer()


class TestSanitizeName:
    """Test mapping raw keys to identifiers."""

    def test_replaces_each_invalid_character(self, sanitizer):
        assert sanitizer.sanitize_name("Invalid identifier {0}") == "Invalid_identifier__0_"

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("Hello", "Hello"),
            ("hello_world", "hello_world"),
            ("Error.NotFound", "Error_NotFound"),
            ("a-b c", "a_b_c"),
            ("Ünïcödé", "Ünïcödé"),
            ("1st place", "_1st_place"),
            ("9", "_9"),
            ("", "_"),
            ("{0}", "_0_"),
        ],
    )
    def test_sanitize(self, sanitizer, key, expected):
        assert sanitizer.sanitize_name(key) == expected

    def test_keywords_get_suffix(self, sanitizer):
        assert sanitizer.sanitize_name("class") == "class_"
        assert sanitizer.sanitize_name("namespace") == "namespace_"

    def test_contextual_keywords_are_kept(self, sanitizer):
        assert sanitizer.sanitize_name("value") == "value"

    @pytest.mark.parametrize(
        "key", ["Invalid identifier {0}", "9lives", "a.b.c", "class", "x y", "#"]
    )
    def test_result_is_always_valid(self, sanitizer, key):
        assert sanitizer.is_valid_identifier(sanitizer.sanitize_name(key))

    def test_is_valid_identifier(self, sanitizer):
        assert sanitizer.is_valid_identifier("_private")
        assert not sanitizer.is_valid_identifier("")
        assert not sanitizer.is_valid_identifier("1abc")
        assert not sanitizer.is_valid_identifier("a-b")
        assert not sanitizer.is_valid_identifier("class")


class TestPythonSanitizer:
    """Test Python-specific naming rules."""

    def test_keywords_get_suffix(self):
        sanitizer = create_python_sanitizer()

        assert sanitizer.sanitize_name("None") == "None_"
        assert sanitizer.sanitize_name("lambda") == "lambda_"

    def test_double_underscore_names_avoid_mangling(self):
        sanitizer = create_python_sanitizer()

        assert sanitizer.sanitize_name("__init__") == "resource__init__"
        assert sanitizer.sanitize_name("  hidden") == "resource__hidden"
        assert not sanitizer.is_valid_identifier("__init__")

    def test_escape_docstring(self):
        assert escape_docstring('say "hi" \\ bye') == 'say \\"hi\\" \\\\ bye'


class TestDocumentationEscaping:
    """Test escaping of resource text for doc comments."""

    def test_escapes_markup_characters(self):
        assert escape_xml_documentation("<b> & </b>") == "&lt;b&gt; &amp; &lt;/b&gt;"

    def test_escapes_quotes(self):
        assert escape_xml_documentation("String '{0}'") == "String &#39;{0}&#39;"
        assert escape_xml_documentation('"x"') == "&#34;x&#34;"

    def test_keeps_format_placeholders(self):
        assert escape_xml_documentation("{0} of {1}") == "{0} of {1}"


class TestSanitizeEntries:
    """Test sanitizing a whole file's entries."""

    def test_attaches_identifier_and_summary(self, sanitizer):
        entries = sanitizer.sanitize_entries(
            [ResourceEntry("Invalid identifier {0}", "String '{0}' is bad.", "Note <1>")]
        )

        entry = entries[0]
        assert entry.identifier == "Invalid_identifier__0_"
        assert entry.key == "Invalid identifier {0}"
        assert entry.summary == "String &#39;{0}&#39; is bad."
        assert entry.escaped_comment == "Note &lt;1&gt;"

    def test_preserves_order(self, sanitizer):
        keys = ["c", "a", "b"]

        entries = sanitizer.sanitize_entries([ResourceEntry(key, key) for key in keys])

        assert [entry.identifier for entry in entries] == keys

    def test_collision_names_both_keys(self, sanitizer):
        with pytest.raises(IdentifierCollisionError) as exc_info:
            sanitizer.sanitize_entries(
                [ResourceEntry("Save file", "1"), ResourceEntry("Save-file", "2")]
            )

        error = exc_info.value
        assert error.identifier == "Save_file"
        assert error.other_key == "Save file"
        assert error.key == "Save-file"
        assert "'Save file'" in str(error) and "'Save-file'" in str(error)

    def test_duplicate_keys_collide(self, sanitizer):
        with pytest.raises(IdentifierCollisionError):
            sanitizer.sanitize_entries([ResourceEntry("A", "1"), ResourceEntry("A", "2")])

    def test_reserved_member_collision(self, sanitizer):
        with pytest.raises(IdentifierCollisionError) as exc_info:
            sanitizer.sanitize_entries(
                [ResourceEntry("Culture Info", "x")], reserved_members={"Culture_Info"}
            )

        assert exc_info.value.reserved_member == "Culture_Info"
        assert exc_info.value.other_key is None

    def test_custom_escaper(self):
        sanitizer = IdentifierSanitizer(documentation_escaper=str.upper)

        entries = sanitizer.sanitize_entries([ResourceEntry("k", "value")])

        assert entries[0].summary == "VALUE"
