"""
CLI command implementations.

This module contains the business logic for each CLI command:
- validate: Validate a document against a schema and report errors in context
"""

import logging
from pathlib import Path

from hashcheck.diagnostics import RenderConfig
from hashcheck.validation import load_schema, validate

from .display import print_failure, print_report, print_success

logger = logging.getLogger(__name__)


def read_document(file_path: Path) -> str:
    """
    Read a document to validate.

    Args:
        file_path: Path to the YAML/JSON document

    Returns:
        str: Document text

    Raises:
        ValueError: If the file doesn't exist
    """
    if not file_path.exists():
        raise ValueError(f"Input file not found: {file_path}")

    with open(file_path, encoding="utf-8") as f:
        return f.read()


def validate_command(
    file_path: Path,
    schema_path: Path,
    context_size: int = 2,
    tab_size: int = 4,
    color: bool = True
) -> int:
    """
    Execute the validate command.

    Args:
        file_path: Path to the document to validate
        schema_path: Path to the JSON schema file
        context_size: Context lines around each error line
        tab_size: Display width of a tab
        color: Use colored output

    Returns:
        int: Number of validation errors found
    """
    config = RenderConfig(context_size=context_size, tab_size=tab_size)

    schema = load_schema(schema_path)
    text = read_document(file_path)
    logger.debug(f"Validating {file_path} against {schema_path}")

    result = validate(text, schema, str(file_path))

    if result.errors:
        print_report(result.errors, result.source_lines, str(file_path), config, color=color)
        print_failure(f"{len(result.errors)} validation errors were found")
    else:
        print_success("No validation errors")

    return len(result.errors)
