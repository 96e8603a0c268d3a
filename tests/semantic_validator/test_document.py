"""Tests for document kind detection and container lookup."""

import pytest

from src.semantic_validator.document import (
    DocumentKind,
    MalformedDocument,
    detect_kind,
    ensure_mapping,
    get_definitions_container,
)


class TestDocument:
    """Test cases for document helpers."""

    def test_detect_openapi(self):
        """Test an 'openapi' key selects OpenAPI 3."""
        assert detect_kind({"openapi": "3.0.0"}) == DocumentKind.OPENAPI_3

    def test_detect_swagger(self):
        """Test a 'swagger' key selects Swagger 2."""
        assert detect_kind({"swagger": "2.0"}) == DocumentKind.SWAGGER_2

    def test_undeclared_version_falls_back_to_swagger(self):
        """Test documents without a version key are treated as Swagger 2."""
        assert detect_kind({"paths": {}}) == DocumentKind.SWAGGER_2

    def test_openapi_container(self):
        """Test OpenAPI 3 uses components.schemas."""
        document = {"openapi": "3.0.0", "components": {"schemas": {"Pet": {}}}}

        path, container = get_definitions_container(document)

        assert path == ("components", "schemas")
        assert container == {"Pet": {}}

    def test_swagger_container(self):
        """Test Swagger 2 uses definitions."""
        document = {"swagger": "2.0", "definitions": {"Pet": {}}}

        assert get_definitions_container(document) == (("definitions",), {"Pet": {}})

    def test_openapi_ignores_definitions_key(self):
        """Test OpenAPI documents only look at components.schemas."""
        document = {"openapi": "3.0.0", "definitions": {"Pet": {}}}

        assert get_definitions_container(document) == (("components", "schemas"), None)

    def test_missing_or_empty_container(self):
        """Test missing or null containers are reported as absent."""
        assert get_definitions_container({"swagger": "2.0"}) == (("definitions",), None)
        assert get_definitions_container({"swagger": "2.0", "definitions": None}) == (("definitions",), None)
        assert get_definitions_container({"openapi": "3.0.0", "components": {}}) == (
            ("components", "schemas"),
            None,
        )

    def test_container_not_a_mapping(self):
        """Test a list-valued definitions section is rejected."""
        with pytest.raises(MalformedDocument, match="'definitions' must be a mapping"):
            get_definitions_container({"swagger": "2.0", "definitions": ["Pet"]})

    def test_components_not_a_mapping(self):
        """Test a scalar components section is rejected."""
        with pytest.raises(MalformedDocument, match="'components' must be a mapping"):
            get_definitions_container({"openapi": "3.0.0", "components": "oops"})

    def test_ensure_mapping(self):
        """Test root mapping check."""
        document = {"swagger": "2.0"}

        assert ensure_mapping(document) is document
        with pytest.raises(MalformedDocument):
            ensure_mapping([document])
