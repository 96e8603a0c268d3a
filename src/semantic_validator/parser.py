"""Document parser for JSON and YAML API descriptions."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import yaml

FILE_TYPES = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


@dataclass
class ParseResult:
    """Result of parsing an API description file."""

    success: bool
    data: Dict[str, Any] = None
    error: str = None
    file_type: str = None  # 'json' or 'yaml'


class DocumentParser:
    """Loads Swagger / OpenAPI documents into plain dict/list trees."""

    def parse_file(self, file_path: Union[str, Path]) -> ParseResult:
        """
        Parse an API description file.

        Args:
            file_path: Path to the document (.json, .yaml, .yml)

        Returns:
            ParseResult with parsed data or error information
        """
        file_path = Path(file_path)

        if not file_path.is_file():
            return ParseResult(success=False, error=f"File not found: {file_path}")

        file_type = FILE_TYPES.get(file_path.suffix.lower())
        if file_type is None:
            return ParseResult(success=False, error=f"Unsupported file extension: {file_path.suffix}")

        try:
            content = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            return ParseResult(success=False, error=f"Unable to read file as UTF-8: {e}", file_type=file_type)
        except OSError as e:
            return ParseResult(success=False, error=f"Error reading file: {e}", file_type=file_type)

        return self.parse_text(content, file_type)

    def parse_text(self, content: str, file_type: str) -> ParseResult:
        """Parse document text of a known type ('json' or 'yaml')."""
        if file_type == "json":
            try:
                data = json.loads(content)
            except json.JSONDecodeError as e:
                return ParseResult(success=False, error=f"Invalid JSON format: {e}", file_type=file_type)
        elif file_type == "yaml":
            try:
                data = yaml.safe_load(content)
            except yaml.YAMLError as e:
                return ParseResult(success=False, error=f"Invalid YAML format: {e}", file_type=file_type)
        else:
            return ParseResult(success=False, error=f"Unsupported file type: {file_type}")

        return ParseResult(success=True, data=data, file_type=file_type)
