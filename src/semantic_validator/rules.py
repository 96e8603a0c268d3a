"""Semantic rules for $ref usage.

Each rule takes the parsed document and returns its diagnostics in traversal
order. Rules only read the document and never depend on each other.
"""

from typing import Any, Dict, List

from .diagnostics import Diagnostic, Level
from .document import get_definitions_container
from .graph_builder import GraphBuilder
from .pointer import is_valid_fragment, parse_reference
from .reference_scanner import REF_KEY, ReferenceScanner

MALFORMED_REF_MESSAGE = "$ref paths must begin with `#/`"
REF_SIBLING_MESSAGE = "Sibling values are not allowed alongside $refs"
UNUSED_DEFINITION_MESSAGE = "Definition was declared but never used in document"


def check_malformed_refs(document: Dict[str, Any]) -> List[Diagnostic]:
    """Report $ref values whose fragment is not a JSON pointer."""
    diagnostics = []

    for path, ref in ReferenceScanner().find_ref_values(document):
        descriptor = parse_reference(ref)

        # No '#' means an opaque external document reference
        if descriptor.has_fragment and not is_valid_fragment(descriptor.fragment):
            diagnostics.append(Diagnostic(message=MALFORMED_REF_MESSAGE, level=Level.ERROR, path=path))

    return diagnostics


def check_ref_siblings(document: Dict[str, Any]) -> List[Diagnostic]:
    """Report every key placed next to a $ref, one diagnostic per key."""
    diagnostics = []

    for path, node in ReferenceScanner().find_ref_nodes(document):
        for key in node:
            if key == REF_KEY:
                continue
            diagnostics.append(Diagnostic(message=REF_SIBLING_MESSAGE, level=Level.WARNING, path=path + (key,)))

    return diagnostics


def check_unused_definitions(document: Dict[str, Any]) -> List[Diagnostic]:
    """Report declared definitions that no local $ref points at."""
    container_path, container = get_definitions_container(document)
    if not container:
        return []

    reachable = GraphBuilder().build_reachable_set(document)
    diagnostics = []

    for name in container:
        # Definition names are literal keys; only the refs side is unescaped
        pointer = container_path + (str(name),)
        if pointer not in reachable:
            diagnostics.append(
                Diagnostic(message=UNUSED_DEFINITION_MESSAGE, level=Level.WARNING, path=container_path + (name,))
            )

    return diagnostics


DEFAULT_RULES = [check_malformed_refs, check_ref_siblings, check_unused_definitions]
