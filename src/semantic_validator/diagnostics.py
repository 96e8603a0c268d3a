"""Diagnostic records and the collector that merges rule output."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Sequence

from .pointer import format_pointer
from .walker import Path

logger = logging.getLogger(__name__)

SOURCE = "semantic-validator"


class Level(str, Enum):
    """Severity of a diagnostic. Errors are blocking, warnings advisory."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding reported by a rule."""

    message: str
    level: Level
    path: Path
    source: str = SOURCE

    @property
    def pointer(self) -> str:
        """Location of the finding as a JSON pointer, e.g. '#/definitions/abc'."""
        return format_pointer(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "level": self.level.value,
            # YAML keys may load as dates or floats; keep the path JSON-safe
            "path": [segment if isinstance(segment, (str, int)) else str(segment) for segment in self.path],
            "source": self.source,
        }


Rule = Callable[[Dict[str, Any]], List[Diagnostic]]


class DiagnosticCollector:
    """Runs rules in a fixed order and concatenates their diagnostics."""

    def __init__(self, rules: Sequence[Rule]):
        self.rules = list(rules)

    def collect(self, document: Dict[str, Any]) -> List[Diagnostic]:
        """
        Run every rule against the document.

        Args:
            document: Parsed document (root mapping)

        Returns:
            Diagnostics grouped by rule order, each group in traversal order
        """
        diagnostics: List[Diagnostic] = []

        for rule in self.rules:
            found = rule(document)
            logger.debug(f"{rule.__name__}: {len(found)} diagnostics")
            diagnostics.extend(found)

        return diagnostics


def filter_by_source(diagnostics: Iterable[Diagnostic], source: str = SOURCE) -> List[Diagnostic]:
    """Keep only diagnostics emitted by the given source."""
    return [diagnostic for diagnostic in diagnostics if diagnostic.source == source]
