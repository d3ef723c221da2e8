"""Parsed documents tagged with the markup format they came from."""

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union

import toml
import yaml

from .errors import BadJsonError, BadTomlError, BadYamlError, UnknownFileExtensionError
from .logger import get_logger

logger = get_logger(__name__)


class FormatKind(str, Enum):
    """Supported markup formats."""

    JSON = "json"
    YAML = "yaml"
    TOML = "toml"


EXTENSIONS = {
    "json": FormatKind.JSON,
    "yaml": FormatKind.YAML,
    "yml": FormatKind.YAML,
    "toml": FormatKind.TOML,
}


def detect_format(path: Union[str, Path]) -> FormatKind:
    """
    Infer the format of a file from its extension.

    Only the path is inspected, the file is never opened.

    Args:
        path: File path

    Returns:
        Matching FormatKind

    Raises:
        UnknownFileExtensionError: If the extension is missing or unsupported
    """
    suffix = Path(path).suffix
    kind = EXTENSIONS.get(suffix[1:].lower()) if suffix else None
    if kind is None:
        raise UnknownFileExtensionError(path)
    return kind


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


@dataclass(frozen=True)
class Format:
    """
    A parsed document and the format it was parsed from.

    Exactly one kind is set per instance. Use the ``json``, ``yaml`` and
    ``toml`` constructors to parse text, or ``Format(kind, value)`` to wrap a
    value that has already been parsed.

    Attributes:
        kind: Origin format
        value: Parsed value tree
    """

    kind: FormatKind
    value: Any

    def __post_init__(self):
        # Accept plain strings like "yaml" as well as FormatKind members
        object.__setattr__(self, "kind", FormatKind(self.kind))

    @classmethod
    def json(cls, src: str) -> "Format":
        """Parse a string as strict JSON."""
        try:
            value = json.loads(src, parse_constant=_reject_constant)
        except Exception as e:
            logger.debug(f"Failed to parse json: {e}")
            raise BadJsonError(e) from e
        return cls(FormatKind.JSON, value)

    @classmethod
    def yaml(cls, src: str) -> "Format":
        """Parse a string as a single YAML document."""
        try:
            value = yaml.safe_load(src)
        except Exception as e:
            logger.debug(f"Failed to parse yaml: {e}")
            raise BadYamlError(e) from e
        return cls(FormatKind.YAML, value)

    @classmethod
    def toml(cls, src: str) -> "Format":
        """Parse a string as TOML."""
        try:
            value = toml.loads(src)
        except Exception as e:
            logger.debug(f"Failed to parse toml: {e}")
            raise BadTomlError(e) from e
        return cls(FormatKind.TOML, value)

    @classmethod
    def parse(cls, src: str, kind: FormatKind) -> "Format":
        """
        Parse a string with the parser for ``kind``.

        Args:
            src: Source text
            kind: Format to parse

        Returns:
            Parsed Format

        Raises:
            ParseError: If the text is not valid under that format
        """
        parsers = {
            FormatKind.JSON: cls.json,
            FormatKind.YAML: cls.yaml,
            FormatKind.TOML: cls.toml,
        }
        return parsers[FormatKind(kind)](src)
