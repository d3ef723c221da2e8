"""Core transcoding logic."""

from pathlib import Path
from typing import Any, Union

from .errors import FileReadError, MarkupConverterError
from .formats import Format, FormatKind, detect_format
from .logger import get_logger
from .render import render
from .values import MAPPERS, copy_tree

logger = get_logger(__name__)


def parse_file(path: Union[str, Path]) -> Format:
    """
    Parse a file, inferring its format from the extension.

    The extension is checked before the file is opened.

    Args:
        path: Path to a .json, .yaml, .yml or .toml file (case-insensitive)

    Returns:
        Parsed Format

    Raises:
        UnknownFileExtensionError: If the extension is missing or unsupported
        FileReadError: If the file cannot be read as UTF-8 text
        ParseError: If the content is not valid for the detected format
    """
    kind = detect_format(path)

    logger.info(f"Loading {kind.value} from {path}")

    try:
        markup = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Failed to read {path}: {e}")
        raise FileReadError(path, e) from e

    return Format.parse(markup, kind)


class Transcoder:
    """
    Holds one parsed document and converts it into other formats' values.

    The Transcoder keeps its own copy of the document and never modifies it:
    every conversion returns a new value.

    Attributes:
        input: The wrapped Format
    """

    def __init__(self, document: Format):
        """
        Wrap an already parsed document.

        Args:
            document: Parsed Format

        Raises:
            TypeError: If document is not a Format
            MarkupConverterError: If the value is nested too deeply to copy
        """
        if not isinstance(document, Format):
            raise TypeError(f"Expected a Format, got {type(document).__name__}")
        self._input = Format(document.kind, copy_tree(document.value, MarkupConverterError))
        logger.debug(f"Initialized Transcoder for {document.kind.value}")

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "Transcoder":
        """Parse a file and wrap it, see parse_file()."""
        return cls(parse_file(path))

    @property
    def input(self) -> Format:
        """A copy of the wrapped document."""
        return Format(self.kind, copy_tree(self._input.value, MarkupConverterError))

    @property
    def kind(self) -> FormatKind:
        return self._input.kind

    def convert(self, to_format: FormatKind) -> Any:
        """
        Convert the document into the value model of ``to_format``.

        A document already in that format is deep-copied as-is.

        Raises:
            ConversionError: If a value cannot be represented in the target
        """
        to_format = FormatKind(to_format)

        if self.kind == to_format:
            return copy_tree(self._input.value, MAPPERS[to_format].error)

        logger.debug(f"Converting {self.kind.value} to {to_format.value}")
        return MAPPERS[to_format](self._input.value)

    def to_json(self) -> Any:
        """Convert the document to a JSON value."""
        return self.convert(FormatKind.JSON)

    def to_yaml(self) -> Any:
        """Convert the document to a YAML value."""
        return self.convert(FormatKind.YAML)

    def to_toml(self) -> Any:
        """Convert the document to a TOML value. Nulls are rejected."""
        return self.convert(FormatKind.TOML)

    def dumps(self, to_format: FormatKind, pretty: bool = True, indent: int = 2) -> str:
        """Convert the document and serialize it as ``to_format`` text."""
        return render(self.convert(to_format), to_format, pretty=pretty, indent=indent)

    def __repr__(self) -> str:
        return f"Transcoder({self._input!r})"
