"""
High-level Python API for hashcheck.

This module provides the main user-facing API for validation and reporting.
"""

from hashcheck.diagnostics import RenderConfig, ReportRenderer, SourcePosition, ValidationError
from hashcheck.validation import ValidationResult, load_schema, validate

# Re-export for convenience
__all__ = [
    "ReportRenderer",
    "RenderConfig",
    "SourcePosition",
    "ValidationError",
    "ValidationResult",
    "load_schema",
    "validate",
]
