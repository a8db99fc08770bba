"""
JSON Schema validator with source positions.

Documents are validated with jsonschema's Draft 7 validator. Every error is
converted into a ValidationError carrying the source spans it refers to, ready
for the report renderer.

Usage:
    ```python
    from hashcheck.validation import validate

    schema = {"type": "object", "properties": {"age": {"type": "integer"}}}
    result = validate("name: Alice\\nage: unknown\\n", schema, "person.yaml")
    if not result.is_valid:
        for error in result.errors:
            print(f"HM{error.code} {error.positions[0]}: {error.message}")
    ```
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from jsonschema import Draft7Validator, FormatChecker
from jsonschema.exceptions import SchemaError

from hashcheck.diagnostics.positions import sort_positions
from hashcheck.diagnostics.types import SourcePosition, ValidationError
from hashcheck.validation.codes import ErrorCode, code_for_keyword
from hashcheck.validation.errors import DocumentSyntaxError, SchemaLoadError
from hashcheck.validation.loader import SourceMap, TrackedLoader, split_source_lines

logger = logging.getLogger(__name__)

# Keywords whose errors concern the object itself rather than a value inside it
_OBJECT_KEYWORDS = {"required", "dependencies", "dependentRequired", "minProperties", "maxProperties"}


@dataclass
class ValidationResult:
    """
    Result of validating a document against a schema.

    Attributes:
        is_valid: Whether the document is valid
        errors: Errors ordered by their first position (empty if valid)
        source_lines: Lines of the document, for rendering
        parsed_output: Parsed document (None if it could not be parsed)
    """
    is_valid: bool
    errors: List[ValidationError]
    source_lines: List[str]
    parsed_output: Optional[Any]


def load_schema(schema_path: Path) -> Dict[str, Any]:
    """
    Load a JSON or YAML schema file.

    Raises:
        SchemaLoadError: If the file cannot be read or is not a valid schema
    """
    try:
        with open(schema_path, encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise SchemaLoadError(f"Cannot read schema file {schema_path}: {e}") from e
    return load_schema_string(content, str(schema_path))


def load_schema_string(content: str, filename: str = "<schema>") -> Dict[str, Any]:
    """
    Parse and check a JSON Schema.

    Args:
        content: Schema text (JSON or YAML)
        filename: Name used in error messages

    Returns:
        Dict[str, Any]: The schema

    Raises:
        SchemaLoadError: If the text cannot be parsed or is not a Draft 7 schema
    """
    try:
        schema, _ = TrackedLoader().load_string(content, filename)
    except DocumentSyntaxError as e:
        raise SchemaLoadError(
            f"Invalid schema document {filename}:{e.line}:{e.column}: {e.message}"
        ) from e

    if not isinstance(schema, (dict, bool)):
        raise SchemaLoadError(
            f"Schema {filename} must be an object or a boolean, got {type(schema).__name__}"
        )

    try:
        Draft7Validator.check_schema(schema)
    except SchemaError as e:
        raise SchemaLoadError(f"Invalid JSON Schema {filename}: {e.message}") from e

    logger.debug(f"Loaded schema from {filename}")
    return schema


def validate(
    text: str,
    schema: Dict[str, Any],
    filename: str = "<string>",
    loader: Optional[TrackedLoader] = None
) -> ValidationResult:
    """
    Validate a YAML/JSON document against a schema.

    A document that cannot be parsed yields a single SYNTAX error positioned
    at the parser's problem location.

    Args:
        text: Document text
        schema: JSON Schema
        filename: Name used in log messages
        loader: Loader to use (a new TrackedLoader by default)

    Returns:
        ValidationResult: Validation result with positioned errors
    """
    source_lines = split_source_lines(text)
    loader = loader or TrackedLoader()

    try:
        data, source_map = loader.load_string(text, filename)
    except DocumentSyntaxError as e:
        logger.debug(f"Syntax error in {filename}: {e}")
        return ValidationResult(
            is_valid=False,
            errors=[
                ValidationError(
                    code=ErrorCode.SYNTAX,
                    message=f"Invalid document: {e.message}",
                    positions=(SourcePosition(e.line, e.column, e.column + 1),)
                )
            ],
            source_lines=source_lines,
            parsed_output=None
        )

    validator = Draft7Validator(schema, format_checker=FormatChecker())
    errors = [
        _convert_jsonschema_error(error, source_map)
        for error in validator.iter_errors(data)
    ]
    errors.sort(key=_first_position_key)

    logger.debug(f"Validated {filename}: {len(errors)} error(s)")

    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        source_lines=source_lines,
        parsed_output=data
    )


def _convert_jsonschema_error(error: Any, source_map: SourceMap) -> ValidationError:
    """
    Convert a jsonschema ValidationError to our ValidationError.

    Args:
        error: jsonschema ValidationError
        source_map: Positions of the validated document

    Returns:
        ValidationError: Error with source positions
    """
    path = tuple(error.absolute_path)
    keyword = error.validator

    positions: Tuple[SourcePosition, ...] = ()
    if keyword == "additionalProperties" and isinstance(error.instance, dict):
        unexpected = _unexpected_keys(error.instance, error.schema)
        positions = tuple(
            position
            for position in (source_map.key(path + (key,)) for key in unexpected)
            if position is not None
        )
    elif keyword not in _OBJECT_KEYWORDS:
        value_position = source_map.value(path)
        if value_position is not None:
            positions = (value_position,)

    if not positions:
        positions = (source_map.anchor(path),)

    return ValidationError(
        code=code_for_keyword(keyword),
        message=error.message,
        positions=positions
    )


def _unexpected_keys(instance: Dict[str, Any], schema: Dict[str, Any]) -> List[str]:
    """Keys rejected by ``additionalProperties: false``."""
    properties = schema.get("properties", {})
    patterns = schema.get("patternProperties", {})
    return [
        key for key in instance
        if key not in properties and not any(re.search(pattern, key) for pattern in patterns)
    ]


def _first_position_key(error: ValidationError) -> Tuple[int, int, int]:
    first = sort_positions(error.positions)[0]
    return first.line, first.start_col, first.end_col


def format_validation_errors(errors: List[ValidationError]) -> str:
    """
    Format validation errors as a plain multi-line summary.

    Args:
        errors: List of validation errors

    Returns:
        str: Formatted error message

    Example:
        ```python
        print(format_validation_errors(result.errors))
        # Validation failed with 2 error(s):
        #   1. HM003 at 1:1: 'name' is a required property
        #   2. HM002 at 2:6: 'x' is not of type 'integer'
        ```
    """
    if not errors:
        return "No validation errors"

    lines = [f"Validation failed with {len(errors)} error(s):"]

    for i, error in enumerate(errors, 1):
        positions = sort_positions(error.positions)
        location = f" at {positions[0]}" if positions else ""
        lines.append(f"  {i}. HM{error.code}{location}: {error.message}")

    return "\n".join(lines)


def quick_validate(text: str, schema: Dict[str, Any]) -> bool:
    """
    Quick validation - just returns True/False.

    Example:
        ```python
        if quick_validate(text, schema):
            print("Valid!")
        ```
    """
    return validate(text, schema).is_valid
