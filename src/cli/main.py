"""Main CLI entry point for the semantic validator."""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from src.cli.commands.validate import validate_command
from src.cli.config import Config
from src.utils.logging_config import setup_logging


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="semantic-validator",
        description="Semantic Validator - report $ref misuse in Swagger 2.0 / OpenAPI 3.0 documents",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate $ref usage in API description files")
    validate_parser.add_argument("files", nargs="+", help="JSON or YAML documents to validate")
    validate_parser.add_argument("--config", help="Path to .env configuration file", default=None)
    validate_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default=None,
        help="Output format (default: OUTPUT_FORMAT from config, or text)",
    )
    validate_parser.add_argument(
        "--fail-on-warnings",
        action="store_true",
        default=None,
        help="Exit with status 1 when warnings are reported",
    )
    validate_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress messages on stderr",
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    setup_logging(verbose=args.verbose)

    # Load configuration
    config = Config(args.config)

    if args.command == "validate":
        exit_code = validate_command(
            config=config,
            files=args.files,
            output_format=args.format,
            fail_on_warnings=args.fail_on_warnings,
        )
        sys.exit(exit_code)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
