"""Validate command - reports $ref misuse in API description files."""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

from src.cli.config import Config
from src.semantic_validator.document import MalformedDocument, detect_kind
from src.semantic_validator.parser import DocumentParser
from src.semantic_validator.reference_scanner import ReferenceScanner
from src.semantic_validator.validator import SemanticValidator, ValidatorConfig

logger = logging.getLogger(__name__)


def validate_command(
    config: Config,
    files: List[str],
    output_format: str = None,
    fail_on_warnings: bool = None,
) -> int:
    """
    Validate each file and print its diagnostics to stdout.

    Args:
        config: Loaded CLI configuration
        files: Paths of documents to validate
        output_format: "text" or "json"; defaults to config.output_format
        fail_on_warnings: Treat warnings as blocking; defaults to config.fail_on_warnings

    Returns:
        Process exit code: 1 if any file failed or has blocking diagnostics, else 0
    """
    output_format = output_format or config.output_format
    if fail_on_warnings is None:
        fail_on_warnings = config.fail_on_warnings

    parser = DocumentParser()
    validator = SemanticValidator(ValidatorConfig.from_config(config))
    scanner = ReferenceScanner()

    reports = []
    failed = False

    for file_path in files:
        logger.info(f"📄 Validating: {file_path}")
        report: Dict[str, Any] = {"file": file_path, "diagnostics": [], "error": None}
        reports.append(report)

        if not config.is_supported_file(file_path):
            report["error"] = f"Unsupported file extension: {Path(file_path).suffix}"
            logger.error(f"❌ {report['error']}")
            failed = True
            continue

        parse_result = parser.parse_file(file_path)
        if not parse_result.success:
            report["error"] = parse_result.error
            logger.error(f"❌ Parse failed: {parse_result.error}")
            failed = True
            continue

        try:
            result = validator.validate(parse_result.data)
        except MalformedDocument as e:
            report["error"] = str(e)
            logger.error(f"❌ Malformed document: {e}")
            failed = True
            continue

        kind = detect_kind(parse_result.data)
        logger.info(f"  🔗 {kind.value} document, {len(scanner.find_references(parse_result.data))} unique $refs")
        logger.info(f"  ✅ {len(result.errors)} errors, {len(result.warnings)} warnings")

        report["diagnostics"] = result.diagnostics
        if not result.is_valid or (fail_on_warnings and result.warnings):
            failed = True

    if output_format == "json":
        _print_json(reports)
    else:
        _print_text(reports)

    return 1 if failed else 0


def _print_text(reports: List[Dict[str, Any]]) -> None:
    for report in reports:
        if report["error"]:
            print(f"{report['file']}: failed: {report['error']}")
            continue
        for diagnostic in report["diagnostics"]:
            print(f"{report['file']}: {diagnostic.level.value} {diagnostic.pointer}: {diagnostic.message}")


def _print_json(reports: List[Dict[str, Any]]) -> None:
    payload = [
        {
            "file": report["file"],
            "error": report["error"],
            "diagnostics": [diagnostic.to_dict() for diagnostic in report["diagnostics"]],
        }
        for report in reports
    ]
    print(json.dumps(payload, indent=2))
