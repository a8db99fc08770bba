"""
Validation layer module.

This module validates YAML/JSON documents against JSON Schemas and attaches a
source position to every error, so the report renderer can show it in context.

Components:
    - loader: ruamel.yaml loader recording key/value source spans
    - validator: Validation with jsonschema, error to position mapping
    - codes: Error code catalog (HM001, HM002, ...)
    - errors: Exceptions for documents and schemas that cannot be loaded

Validation Flow:
    1. Split the document into source lines
    2. Parse it with position tracking (syntax errors become HM001 errors)
    3. Validate the parsed data with jsonschema's Draft 7 validator
    4. Map every error path to the source span of its key or value
    5. Order errors by their first position

Example:
    ```python
    from hashcheck.validation import load_schema, validate

    schema = load_schema(Path("schema.json"))
    result = validate(Path("config.yaml").read_text(), schema, "config.yaml")
    print(f"{len(result.errors)} errors")
    ```
"""

from hashcheck.validation.validator import (
    validate,
    quick_validate,
    load_schema,
    load_schema_string,
    ValidationResult,
    format_validation_errors
)
from hashcheck.validation.loader import TrackedLoader, SourceMap, split_source_lines
from hashcheck.validation.codes import ErrorCode, code_for_keyword
from hashcheck.validation.errors import HashcheckError, DocumentSyntaxError, SchemaLoadError

__all__ = [
    "validate",
    "quick_validate",
    "load_schema",
    "load_schema_string",
    "ValidationResult",
    "format_validation_errors",
    "TrackedLoader",
    "SourceMap",
    "split_source_lines",
    "ErrorCode",
    "code_for_keyword",
    "HashcheckError",
    "DocumentSyntaxError",
    "SchemaLoadError",
]
