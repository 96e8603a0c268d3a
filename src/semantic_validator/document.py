"""Document kind detection and definitions container lookup."""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .walker import Path


class MalformedDocument(ValueError):
    """Raised when a document cannot be validated at all."""


class DocumentKind(Enum):
    """API description flavours, distinguished by their top-level version key."""

    OPENAPI_3 = "openapi"
    SWAGGER_2 = "swagger"


DEFINITIONS_CONTAINERS = {
    DocumentKind.OPENAPI_3: ("components", "schemas"),
    DocumentKind.SWAGGER_2: ("definitions",),
}


def ensure_mapping(document: Any) -> Dict[str, Any]:
    """Return the document if its root is a mapping, otherwise fail fast."""
    if not isinstance(document, dict):
        raise MalformedDocument(f"Document root must be a mapping, got {type(document).__name__}")
    return document


def detect_kind(document: Dict[str, Any]) -> DocumentKind:
    """OpenAPI 3 when an 'openapi' key is declared; Swagger 2 otherwise."""
    if "openapi" in document:
        return DocumentKind.OPENAPI_3
    return DocumentKind.SWAGGER_2


def get_definitions_container(document: Dict[str, Any]) -> Tuple[Path, Optional[Dict[str, Any]]]:
    """
    Locate the reusable definitions map of the document.

    Args:
        document: Parsed document (root mapping)

    Returns:
        (container path, container mapping) - the mapping is None when the
        document declares no definitions

    Raises:
        MalformedDocument: If the container or one of its parents is not a mapping
    """
    container_path = DEFINITIONS_CONTAINERS[detect_kind(document)]
    node: Any = document

    for depth, key in enumerate(container_path):
        node = node.get(key)
        # An empty YAML section loads as None
        if node is None:
            return container_path, None
        if not isinstance(node, dict):
            location = ".".join(container_path[: depth + 1])
            raise MalformedDocument(f"'{location}' must be a mapping, got {type(node).__name__}")

    return container_path, node
