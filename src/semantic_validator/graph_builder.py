"""Graph Builder for collecting locally referenced pointers."""

import logging
from typing import Any, Dict, Set

from .pointer import CanonicalPointer, is_valid_fragment, parse_reference, to_canonical_pointer
from .reference_scanner import ReferenceScanner

logger = logging.getLogger(__name__)


class GraphBuilder:
    """Builds the set of document locations targeted by same-document references."""

    def __init__(self):
        self.scanner = ReferenceScanner()

    def build_reachable_set(self, document: Dict[str, Any]) -> Set[CanonicalPointer]:
        """
        Collect canonical pointers of every local, well-formed $ref.

        Remote references and references with malformed fragments are left
        out; they cannot mark a local definition as used.

        Args:
            document: Parsed document (root mapping)

        Returns:
            Set of unescaped token tuples
        """
        reachable = set()
        skipped = 0

        for _, ref in self.scanner.find_ref_values(document):
            descriptor = parse_reference(ref)

            if not descriptor.is_local or not descriptor.has_fragment:
                skipped += 1
                continue

            if not is_valid_fragment(descriptor.fragment):
                skipped += 1
                continue

            reachable.add(to_canonical_pointer(descriptor.fragment))

        logger.debug(f"Reachable set: {len(reachable)} pointers ({skipped} refs skipped)")
        return reachable
