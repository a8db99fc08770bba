"""
hashcheck: Validate documents against JSON Schemas with in-context error reports

hashcheck validates YAML or JSON documents against a JSON Schema and prints
every error inside its source context, the way a compiler reports diagnostics.

Key Features:
    - Source position for every schema error (keys, values, unexpected keys)
    - Nearby errors grouped into a single excerpt
    - Tab-aware column pointers
    - Colored terminal output with a plain-text fallback

Quick Start:
    ```python
    from hashcheck import ReportRenderer, load_schema, validate

    schema = load_schema(Path("schema.json"))
    text = Path("config.yaml").read_text()
    result = validate(text, schema, "config.yaml")

    ReportRenderer().render(result.errors, result.source_lines, "config.yaml")
    ```

Architecture:
    1. Loader: Parse YAML/JSON with ruamel.yaml, recording source spans
    2. Validator: Validate with jsonschema, attach spans to every error
    3. Renderer: Group error lines and print annotated excerpts
    4. CLI: Typer command wiring the above, exit status for scripts
"""

__version__ = "0.1.0"

# Main API exports - these are the primary user-facing names
from hashcheck.api import (  # noqa: F401
    ReportRenderer,
    RenderConfig,
    SourcePosition,
    ValidationError,
    ValidationResult,
    load_schema,
    validate,
)

__all__ = [
    "ReportRenderer",
    "RenderConfig",
    "SourcePosition",
    "ValidationError",
    "ValidationResult",
    "load_schema",
    "validate",
]
