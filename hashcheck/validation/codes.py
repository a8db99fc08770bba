"""
Error code catalog.

Codes are three-digit strings rendered as ``HM<code>`` in report headers. Each
jsonschema keyword maps to one code; keywords without a dedicated code fall
back to ``OTHER``.
"""

from typing import Dict


class ErrorCode:
    """Stable identifiers for reported errors."""

    SYNTAX = "001"                 # document cannot be parsed
    TYPE = "002"                   # wrong value type
    REQUIRED = "003"               # missing required property
    ADDITIONAL_PROPERTIES = "004"  # unexpected property
    ENUM = "005"                   # value not in enum
    CONST = "006"                  # value differs from const
    PATTERN = "007"                # string does not match pattern
    FORMAT = "008"                 # string does not match format
    LENGTH = "009"                 # string too short / too long
    RANGE = "010"                  # number out of range
    ITEMS = "011"                  # array size or uniqueness
    PROPERTY_COUNT = "012"         # too few / too many properties
    COMPOSITION = "013"            # anyOf / oneOf / allOf / not
    DEPENDENCY = "014"             # dependencies / dependentRequired
    OTHER = "099"


KEYWORD_CODES: Dict[str, str] = {
    "type": ErrorCode.TYPE,
    "required": ErrorCode.REQUIRED,
    "additionalProperties": ErrorCode.ADDITIONAL_PROPERTIES,
    "enum": ErrorCode.ENUM,
    "const": ErrorCode.CONST,
    "pattern": ErrorCode.PATTERN,
    "format": ErrorCode.FORMAT,
    "minLength": ErrorCode.LENGTH,
    "maxLength": ErrorCode.LENGTH,
    "minimum": ErrorCode.RANGE,
    "maximum": ErrorCode.RANGE,
    "exclusiveMinimum": ErrorCode.RANGE,
    "exclusiveMaximum": ErrorCode.RANGE,
    "multipleOf": ErrorCode.RANGE,
    "minItems": ErrorCode.ITEMS,
    "maxItems": ErrorCode.ITEMS,
    "uniqueItems": ErrorCode.ITEMS,
    "contains": ErrorCode.ITEMS,
    "additionalItems": ErrorCode.ITEMS,
    "minProperties": ErrorCode.PROPERTY_COUNT,
    "maxProperties": ErrorCode.PROPERTY_COUNT,
    "propertyNames": ErrorCode.PROPERTY_COUNT,
    "anyOf": ErrorCode.COMPOSITION,
    "oneOf": ErrorCode.COMPOSITION,
    "allOf": ErrorCode.COMPOSITION,
    "not": ErrorCode.COMPOSITION,
    "if": ErrorCode.COMPOSITION,
    "dependencies": ErrorCode.DEPENDENCY,
    "dependentRequired": ErrorCode.DEPENDENCY,
}


def code_for_keyword(keyword: str) -> str:
    """Return the error code for a failed jsonschema keyword."""
    return KEYWORD_CODES.get(keyword, ErrorCode.OTHER)
