"""Markup Converter - Convert parsed documents between JSON, YAML, and TOML."""

from .errors import (
    BadJsonError,
    BadTomlError,
    BadYamlError,
    ConversionError,
    FileReadError,
    JsonConversionError,
    MarkupConverterError,
    ParseError,
    QueryError,
    TomlConversionError,
    UnknownFileExtensionError,
    YamlConversionError,
)
from .formats import Format, FormatKind, detect_format
from .query import query
from .render import render
from .transcoder import Transcoder, parse_file

__version__ = "0.1.0"

__all__ = [
    "BadJsonError",
    "BadTomlError",
    "BadYamlError",
    "ConversionError",
    "FileReadError",
    "Format",
    "FormatKind",
    "JsonConversionError",
    "MarkupConverterError",
    "ParseError",
    "QueryError",
    "TomlConversionError",
    "Transcoder",
    "UnknownFileExtensionError",
    "YamlConversionError",
    "detect_format",
    "parse_file",
    "query",
    "render",
]
