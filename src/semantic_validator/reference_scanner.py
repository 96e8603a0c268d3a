"""Reference Scanner for finding $ref nodes in API description documents."""

from typing import Any, Dict, Iterator, List, Tuple

from .walker import Path, walk

REF_KEY = "$ref"


class ReferenceScanner:
    """Scans document content for $ref occurrences, keeping their locations."""

    def find_ref_nodes(self, content: Any) -> Iterator[Tuple[Path, Dict[str, Any]]]:
        """
        Find every mapping that holds a string $ref.

        Args:
            content: Document content to scan (dict, list, or other)

        Returns:
            Iterator of (path, mapping) pairs in traversal order
        """
        for path, node in walk(content):
            if isinstance(node, dict) and isinstance(node.get(REF_KEY), str):
                yield path, node

    def find_ref_values(self, content: Any) -> Iterator[Tuple[Path, str]]:
        """Find every $ref string together with the path of the $ref key itself."""
        for path, node in self.find_ref_nodes(content):
            yield path + (REF_KEY,), node[REF_KEY]

    def find_references(self, content: Any) -> List[str]:
        """Return the unique $ref strings found in content, sorted."""
        return sorted({ref for _, ref in self.find_ref_values(content)})
