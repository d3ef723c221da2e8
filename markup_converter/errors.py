"""Exceptions raised by markup_converter."""

from typing import Any


class MarkupConverterError(Exception):
    """Base class for all markup_converter errors."""

    def __init__(self, message: str, reason: Any = None):
        super().__init__(message)
        self.reason = reason if reason is not None else message


class ParseError(MarkupConverterError, ValueError):
    """Source text could not be parsed under its grammar."""

    label = "markup"

    def __init__(self, reason: Any):
        super().__init__(f"Could not parse {self.label}: {reason}", reason)


class BadJsonError(ParseError):
    label = "JSON"


class BadYamlError(ParseError):
    label = "YAML"


class BadTomlError(ParseError):
    label = "TOML"


class UnknownFileExtensionError(MarkupConverterError, ValueError):
    """Path has a missing or unsupported file extension."""

    def __init__(self, path: Any):
        self.path = str(path)
        super().__init__(f"Unknown file extension for file '{self.path}'", self.path)


class FileReadError(MarkupConverterError, OSError):
    """Source file could not be read as UTF-8 text."""

    def __init__(self, path: Any, reason: Any):
        self.path = str(path)
        super().__init__(f"Could not read file '{self.path}', error was: {reason}", reason)

    def __str__(self) -> str:
        return self.args[0]


class ConversionError(MarkupConverterError, ValueError):
    """A value could not be remapped into the target representation."""

    target = None

    def __init__(self, reason: Any):
        super().__init__(f"Could not convert to {self.target.upper()}: {reason}", reason)


class JsonConversionError(ConversionError):
    target = "json"


class YamlConversionError(ConversionError):
    target = "yaml"


class TomlConversionError(ConversionError):
    target = "toml"


class QueryError(MarkupConverterError, ValueError):
    """JMESPath expression failed to compile or evaluate."""

    def __init__(self, reason: Any):
        super().__init__(f"Query failed: {reason}", reason)
