"""Tests for the pointer model."""

import pytest

from src.semantic_validator.pointer import (
    MalformedFragment,
    ReferenceDescriptor,
    escape_token,
    format_pointer,
    is_valid_fragment,
    parse_reference,
    to_canonical_pointer,
    unescape_token,
)


class TestParseReference:
    """Test cases for parse_reference."""

    def test_local_reference(self):
        """Test a same-document reference has an empty external part."""
        descriptor = parse_reference("#/definitions/Pet")

        assert descriptor == ReferenceDescriptor(external="", fragment="/definitions/Pet")
        assert descriptor.is_local is True
        assert descriptor.has_fragment is True

    def test_remote_reference_with_fragment(self):
        """Test the external part is everything before the first '#'."""
        descriptor = parse_reference("http://google.com#/myObj/abc")

        assert descriptor.external == "http://google.com"
        assert descriptor.fragment == "/myObj/abc"
        assert descriptor.is_local is False

    def test_reference_without_hash(self):
        """Test a reference with no '#' has no fragment."""
        descriptor = parse_reference("common.yaml")

        assert descriptor.external == "common.yaml"
        assert descriptor.fragment is None
        assert descriptor.has_fragment is False

    def test_split_on_first_hash_only(self):
        """Test later '#' characters stay in the fragment."""
        descriptor = parse_reference("a.yaml#/x#y")

        assert descriptor.external == "a.yaml"
        assert descriptor.fragment == "/x#y"

    def test_empty_fragment(self):
        """Test '#' alone yields an empty, present fragment."""
        descriptor = parse_reference("#")

        assert descriptor.fragment == ""
        assert descriptor.has_fragment is True


class TestCanonicalPointer:
    """Test cases for fragment canonicalization."""

    def test_simple_pointer(self):
        """Test a plain fragment splits into its tokens."""
        assert to_canonical_pointer("/components/schemas/Pet") == ("components", "schemas", "Pet")

    def test_empty_fragment_is_document_root(self):
        """Test the empty fragment points at the document root."""
        assert to_canonical_pointer("") == ()

    def test_slash_only_is_single_empty_token(self):
        """Test '/' alone is a single empty-string token."""
        assert to_canonical_pointer("/") == ("",)

    def test_unescapes_tokens(self):
        """Test '~1' decodes to '/' and '~0' decodes to '~'."""
        assert to_canonical_pointer("/definitions/x~1Foo") == ("definitions", "x/Foo")
        assert to_canonical_pointer("/definitions/x~0Bar") == ("definitions", "x~Bar")

    def test_no_double_unescape(self):
        """Test '~01' decodes to the literal '~1', not '/'."""
        assert unescape_token("~01") == "~1"
        assert to_canonical_pointer("/a~01b") == ("a~1b",)

    def test_missing_leading_slash_raises(self):
        """Test a fragment without a leading '/' is rejected."""
        with pytest.raises(MalformedFragment):
            to_canonical_pointer("myObj/abc")

    def test_is_valid_fragment(self):
        """Test fragment syntax checks."""
        assert is_valid_fragment("") is True
        assert is_valid_fragment("/a") is True
        assert is_valid_fragment("a/b") is False


class TestFormatPointer:
    """Test cases for rendering paths as pointers."""

    def test_escape_token(self):
        """Test literal keys are escaped '~' first, then '/'."""
        assert escape_token("x/Foo") == "x~1Foo"
        assert escape_token("x~Bar") == "x~0Bar"
        assert escape_token("~1") == "~01"

    def test_format_path(self):
        """Test a path renders as a same-document pointer."""
        path = ("paths", "/CoolPath", "get", "description")

        assert format_pointer(path) == "#/paths/~1CoolPath/get/description"

    def test_format_integer_segments(self):
        """Test list indices render as numbers."""
        assert format_pointer(("tags", 0, "name")) == "#/tags/0/name"

    def test_format_root(self):
        """Test the empty path renders as '#'."""
        assert format_pointer(()) == "#"
