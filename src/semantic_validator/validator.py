"""Semantic validator for $ref usage in Swagger 2.0 / OpenAPI 3.0 documents."""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List

from .diagnostics import Diagnostic, DiagnosticCollector, Level
from .document import ensure_mapping
from .rules import DEFAULT_RULES, check_malformed_refs, check_ref_siblings, check_unused_definitions

if TYPE_CHECKING:
    from ..cli.config import Config

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of semantic validation."""

    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.level == Level.ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.level == Level.WARNING]

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0


@dataclass
class ValidatorConfig:
    """Configuration for semantic validation."""

    check_malformed_refs: bool = True
    check_ref_siblings: bool = True
    check_unused_definitions: bool = True

    @classmethod
    def from_config(cls, config: "Config") -> "ValidatorConfig":
        """Create config from Config object."""
        return cls(
            check_malformed_refs=config.check_malformed_refs,
            check_ref_siblings=config.check_ref_siblings,
            check_unused_definitions=config.check_unused_definitions,
        )


class SemanticValidator:
    """Runs the enabled $ref rules against a parsed document."""

    def __init__(self, config: ValidatorConfig = None):
        self.config = config or ValidatorConfig()
        self.collector = DiagnosticCollector(self._enabled_rules())

    def _enabled_rules(self):
        """Enabled rules, kept in their fixed execution order."""
        enabled = {
            check_malformed_refs: self.config.check_malformed_refs,
            check_ref_siblings: self.config.check_ref_siblings,
            check_unused_definitions: self.config.check_unused_definitions,
        }
        return [rule for rule in DEFAULT_RULES if enabled[rule]]

    def validate(self, document: Any) -> ValidationResult:
        """
        Validate $ref usage in a parsed document.

        Args:
            document: Parsed Swagger 2.0 or OpenAPI 3.0 document

        Returns:
            ValidationResult with diagnostics in rule order

        Raises:
            MalformedDocument: If the root or the definitions container is not a mapping
        """
        document = ensure_mapping(document)
        diagnostics = self.collector.collect(document)
        logger.debug(f"Semantic validation produced {len(diagnostics)} diagnostics")
        return ValidationResult(diagnostics=diagnostics)


def validate(document: Any) -> List[Diagnostic]:
    """Validate a parsed document with every rule enabled."""
    return SemanticValidator().validate(document).diagnostics
