"""
Exceptions raised while loading documents and schemas.

Validation problems are never raised: they are returned as ValidationError
values. These exceptions cover input that cannot be validated at all.
"""


class HashcheckError(Exception):
    """Base class for hashcheck errors."""


class DocumentSyntaxError(HashcheckError):
    """
    Raised when a document cannot be parsed.

    Attributes:
        message: Parser problem description
        line: 1-indexed line of the problem
        column: 1-indexed column of the problem
    """

    def __init__(self, message: str, line: int = 1, column: int = 1):
        super().__init__(f"{message} (line {line}, column {column})")
        self.message = message
        self.line = line
        self.column = column


class SchemaLoadError(HashcheckError):
    """Raised when a schema file cannot be read or is not a valid JSON Schema."""
