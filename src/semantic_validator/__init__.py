"""Semantic validation of $ref usage in Swagger 2.0 and OpenAPI 3.0 documents."""

from .diagnostics import SOURCE, Diagnostic, DiagnosticCollector, Level, filter_by_source
from .document import DocumentKind, MalformedDocument, detect_kind, get_definitions_container
from .graph_builder import GraphBuilder
from .parser import DocumentParser, ParseResult
from .pointer import MalformedFragment, ReferenceDescriptor, parse_reference, to_canonical_pointer
from .reference_scanner import ReferenceScanner
from .validator import SemanticValidator, ValidationResult, ValidatorConfig, validate
from .walker import walk

__all__ = [
    "SOURCE",
    "Diagnostic",
    "DiagnosticCollector",
    "DocumentKind",
    "DocumentParser",
    "GraphBuilder",
    "Level",
    "MalformedDocument",
    "MalformedFragment",
    "ParseResult",
    "ReferenceDescriptor",
    "ReferenceScanner",
    "SemanticValidator",
    "ValidationResult",
    "ValidatorConfig",
    "detect_kind",
    "filter_by_source",
    "get_definitions_container",
    "parse_reference",
    "to_canonical_pointer",
    "validate",
    "walk",
]
