"""Text serialization of converted values."""

import json
from typing import Any

import toml
import yaml

from .errors import JsonConversionError, TomlConversionError, YamlConversionError
from .formats import FormatKind
from .logger import get_logger

logger = get_logger(__name__)


def render(value: Any, to_format: FormatKind, pretty: bool = True, indent: int = 2) -> str:
    """
    Serialize a value to text.

    The value should already be in the target's value model, as returned by
    the Transcoder conversions.

    Args:
        value: Value to serialize
        to_format: Target format
        pretty: Whether to pretty-print (JSON only)
        indent: Indentation level (JSON and YAML)

    Returns:
        Formatted string

    Raises:
        ConversionError: If the encoder rejects the value
    """
    to_format = FormatKind(to_format)

    if to_format == FormatKind.JSON:
        try:
            if pretty:
                return json.dumps(value, indent=indent, ensure_ascii=False, allow_nan=False)
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            logger.debug(f"Failed to render json: {e}")
            raise JsonConversionError(e) from e

    if to_format == FormatKind.YAML:
        try:
            return yaml.safe_dump(
                value,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
                indent=indent,
            )
        except yaml.YAMLError as e:
            logger.debug(f"Failed to render yaml: {e}")
            raise YamlConversionError(e) from e

    try:
        return toml.dumps(value)
    except Exception as e:
        logger.debug(f"Failed to render toml: {e}")
        raise TomlConversionError(e) from e
