"""Configuration management for the semantic validator CLI."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Config:
    """Configuration loaded from .env file."""

    def __init__(self, env_file: Optional[str] = None):
        """Load configuration from .env file."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Load from project root .env
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        # Input files
        self.supported_extensions = os.getenv("SUPPORTED_EXTENSIONS", ".json,.yaml,.yml").split(",")

        # Rules
        self.check_malformed_refs = _env_flag("CHECK_MALFORMED_REFS", "true")
        self.check_ref_siblings = _env_flag("CHECK_REF_SIBLINGS", "true")
        self.check_unused_definitions = _env_flag("CHECK_UNUSED_DEFINITIONS", "true")

        # Output
        self.fail_on_warnings = _env_flag("FAIL_ON_WARNINGS", "false")
        self.output_format = os.getenv("OUTPUT_FORMAT", "text")

    def is_supported_file(self, file_path: str) -> bool:
        """Check the file extension against SUPPORTED_EXTENSIONS."""
        return Path(file_path).suffix.lower() in self.supported_extensions
