"""
Document loader with source position tracking.

Documents (YAML, or JSON as a YAML subset) are parsed with ruamel.yaml in
round-trip mode, which records the line and column of every key and value.
The loader turns those into SourcePosition spans indexed by instance path, the
same path jsonschema reports for an error (a tuple of keys and list indexes).

Usage:
    ```python
    from hashcheck.validation.loader import TrackedLoader

    data, source_map = TrackedLoader().load_string("name: Alice\\nage: x\\n")
    source_map.value(("age",))  # SourcePosition(line=2, start_col=6, end_col=7)
    ```
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.constructor import RoundTripConstructor
from ruamel.yaml.error import MarkedYAMLError, YAMLError
from ruamel.yaml.reader import ReaderError

from hashcheck.diagnostics.types import SourcePosition
from hashcheck.validation.errors import DocumentSyntaxError

logger = logging.getLogger(__name__)

_MAX_DOCUMENT_SIZE = 5_000_000  # characters

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

InstancePath = Tuple[Union[str, int], ...]

# Fallback position for errors about the document as a whole
DOCUMENT_START = SourcePosition(line=1, start_col=1, end_col=2)


def split_source_lines(text: str) -> List[str]:
    """
    Split text on CRLF, CR or LF.

    Unlike ``str.splitlines`` no other characters count as line breaks, and a
    trailing newline produces a final empty line.
    """
    return _LINE_BREAK_RE.split(text)


class SourceMap:
    """Maps instance paths to the source spans of their keys and values."""

    def __init__(self) -> None:
        self._keys: Dict[InstancePath, SourcePosition] = {}
        self._values: Dict[InstancePath, SourcePosition] = {}

    def add_key(self, path: InstancePath, position: SourcePosition) -> None:
        self._keys[path] = position

    def add_value(self, path: InstancePath, position: SourcePosition) -> None:
        self._values[path] = position

    def key(self, path: InstancePath) -> Optional[SourcePosition]:
        """Span of the mapping key at ``path``, if the path ends in a key."""
        return self._keys.get(tuple(path))

    def value(self, path: InstancePath) -> Optional[SourcePosition]:
        """Span of the value at ``path``."""
        return self._values.get(tuple(path))

    def anchor(self, path: InstancePath) -> SourcePosition:
        """
        Best position to report something about the node at ``path``.

        Prefers the node's key, then its value, then the closest ancestor, and
        finally the start of the document.
        """
        current = tuple(path)
        while True:
            position = self.key(current) or self.value(current)
            if position is not None:
                return position
            if not current:
                return DOCUMENT_START
            current = current[:-1]

    @property
    def paths(self) -> List[InstancePath]:
        return list(self._values.keys())


class SourceTextConstructor(RoundTripConstructor):
    """Round-trip constructor that keeps timestamps as their source text."""

    def construct_yaml_timestamp(self, node: Any, values: Any = None) -> str:
        return str(node.value)


SourceTextConstructor.add_constructor(
    "tag:yaml.org,2002:timestamp",
    SourceTextConstructor.construct_yaml_timestamp
)


class TrackedLoader:
    """
    YAML/JSON loader that records source positions.

    Uses ruamel.yaml round-trip loading, which keeps line/column info on every
    parsed collection. Unquoted dates stay strings, as in JSON.
    """

    def __init__(self) -> None:
        self._yaml = YAML()
        self._yaml.Constructor = SourceTextConstructor

    def load(self, path: Path) -> Tuple[Any, SourceMap]:
        """Load a document file (UTF-8)."""
        with open(path, encoding="utf-8") as f:
            content = f.read()
        return self.load_string(content, str(path))

    def load_string(self, content: str, filename: str = "<string>") -> Tuple[Any, SourceMap]:
        """
        Parse a document and collect its source positions.

        Args:
            content: Document text
            filename: Name used in log messages

        Returns:
            Tuple[Any, SourceMap]: Plain Python data and its source map

        Raises:
            DocumentSyntaxError: If the document is too large or malformed
        """
        if len(content) > _MAX_DOCUMENT_SIZE:
            raise DocumentSyntaxError(
                f"document exceeds maximum size "
                f"({len(content):,} chars > {_MAX_DOCUMENT_SIZE:,} limit)"
            )

        try:
            data = self._yaml.load(content)
        except MarkedYAMLError as e:
            raise _syntax_error(e) from e
        except ReaderError as e:
            raise _reader_error(e, content) from e
        except YAMLError as e:
            message = str(e).strip().splitlines()
            raise DocumentSyntaxError(message[0] if message else type(e).__name__) from e

        source_map = SourceMap()
        lines = split_source_lines(content)
        self._extract_positions(data, (), lines, source_map)
        logger.debug(f"Loaded {filename}: {len(source_map.paths)} positioned nodes")
        return _to_plain(data), source_map

    def _extract_positions(
        self,
        node: Any,
        path: InstancePath,
        lines: List[str],
        source_map: SourceMap
    ) -> None:
        """Recursively record key and value spans of ruamel.yaml collections."""
        if isinstance(node, CommentedMap):
            flow = bool(node.fa.flow_style())
            for key in node:
                child_path = path + (str(key),)
                value = node[key]

                key_pos = _lc_position(node.lc.key, key)
                if key_pos is not None:
                    source_map.add_key(child_path, _span(lines, key_pos, flow, key))

                value_pos = _lc_position(node.lc.value, key)
                if value_pos is not None:
                    source_map.add_value(child_path, _span(lines, value_pos, flow, value))

                self._extract_positions(value, child_path, lines, source_map)

        elif isinstance(node, CommentedSeq):
            flow = bool(node.fa.flow_style())
            for index, item in enumerate(node):
                child_path = path + (index,)
                item_pos = _lc_position(node.lc.item, index)
                if item_pos is not None:
                    source_map.add_value(child_path, _span(lines, item_pos, flow, item))
                self._extract_positions(item, child_path, lines, source_map)


def _syntax_error(error: MarkedYAMLError) -> DocumentSyntaxError:
    mark = error.problem_mark or error.context_mark
    message = error.problem or error.context or type(error).__name__
    if mark is None:
        return DocumentSyntaxError(message)
    return DocumentSyntaxError(message, line=mark.line + 1, column=mark.column + 1)


def _reader_error(error: ReaderError, content: str) -> DocumentSyntaxError:
    """Locate a reader error (a character offset) as line and column."""
    character = error.character
    if isinstance(character, str):
        character = ord(character)
    if isinstance(character, int):
        message = f"unacceptable character #x{character:04x}: {error.reason}"
    else:
        message = str(error.reason)
    before = split_source_lines(content[:max(0, error.position)])
    return DocumentSyntaxError(message, line=len(before), column=len(before[-1]) + 1)


def _lc_position(lookup: Any, key: Any) -> Optional[Tuple[int, int]]:
    """Read a 0-based (line, column) pair from ruamel.yaml's line/col info."""
    try:
        position = lookup(key)
    except (AttributeError, KeyError, IndexError, TypeError):
        return None
    if not position or position[0] is None or position[1] is None:
        return None
    return position[0], position[1]


def _span(lines: List[str], position: Tuple[int, int], flow: bool, node: Any) -> SourcePosition:
    """Build a 1-based span starting at a 0-based ruamel.yaml position."""
    line, col = position
    if isinstance(node, (dict, list)):
        width = 1
    else:
        text = lines[line] if line < len(lines) else ""
        width = _scalar_width(text, col, flow)
    return SourcePosition(line=line + 1, start_col=col + 1, end_col=col + 1 + width)


def _scalar_width(text: str, col: int, flow: bool) -> int:
    """
    Width of the scalar token starting at ``col``.

    Quoted scalars end at their closing quote. Plain scalars end before a
    comment or the end of the line, and in flow collections before ``,``,
    ``]`` or ``}``.
    """
    rest = text[col:]
    if not rest:
        return 1

    quote = rest[0]
    if quote in "'\"":
        i = 1
        while i < len(rest):
            char = rest[i]
            if quote == '"' and char == "\\":
                i += 2
                continue
            if char == quote:
                if quote == "'" and rest[i + 1:i + 2] == "'":
                    i += 2
                    continue
                return i + 1
            i += 1
        return len(rest)

    stops = ",]}" if flow else ""
    end = len(rest)
    for i, char in enumerate(rest):
        if char in stops:
            end = i
            break
        if char == "#" and i > 0 and rest[i - 1] in " \t":
            end = i
            break
    return max(1, len(rest[:end].rstrip()))


def _to_plain(data: Any) -> Any:
    """Convert ruamel.yaml CommentedMap/Seq to plain dict/list."""
    if isinstance(data, dict):
        return {str(k): _to_plain(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_to_plain(item) for item in data]
    return data
