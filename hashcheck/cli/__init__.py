"""
Command-line interface module.

This module provides a rich terminal interface for hashcheck using Typer and Rich.

Commands:
    - validate: Validate a YAML/JSON file against a JSON Schema

Features:
    - Every error shown inside its source context
    - Nearby errors grouped into one excerpt
    - Colored markers, locations and summary (disable with --no-color)
    - Exit status 0 when valid, 1 on validation errors or failures

Example Usage:
    ```bash
    # Validate a document
    hashcheck validate config.yaml schema.json

    # More context, plain output
    hashcheck validate config.yaml schema.json --context-size 4 --no-color
    ```
"""

from .main import app

__all__ = ["app"]
