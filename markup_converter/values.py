"""
Structural mapping between parsed value trees.

Every parser hands back plain Python values (dict, list, str, int, float,
bool, None) plus a few format-specific extras: TOML and YAML produce
datetime/date objects, TOML produces time objects, and YAML can produce
bytes (!!binary) and sets (!!set). The functions here remap such a tree into
the value model of a target format, raising a ConversionError that names the
offending location when a value has no counterpart there.

Integers are limited to the range a signed or unsigned 64-bit integer can
hold, for every target. Keys that collide once converted to strings, and
trees nested deeper than the interpreter can recurse, are errors as well.
"""

import copy
import math
from datetime import date, time
from typing import Any, Callable, Dict, Type

from .errors import ConversionError, JsonConversionError, TomlConversionError, YamlConversionError
from .formats import FormatKind

INT_MIN = -(2**63)
INT_MAX = 2**64 - 1


def _child(path: str, key: Any) -> str:
    if isinstance(key, int) and not isinstance(key, bool):
        return f"{path}[{key}]"
    return f"{path}.{key}"


class _Mapper:
    """Recursive remapper for one target format."""

    error: Type[ConversionError]
    allow_null = True
    allow_non_finite = True

    def __call__(self, value: Any) -> Any:
        try:
            return self.map(value, "$")
        except RecursionError as e:
            raise self.error("value nested too deeply") from e

    def fail(self, path: str, message: str) -> None:
        raise self.error(f"{message} at {path}")

    def map(self, value: Any, path: str) -> Any:
        if value is None:
            if not self.allow_null:
                self.fail(path, "null has no representation")
            return None
        if isinstance(value, bool) or isinstance(value, str):
            return value
        if isinstance(value, int):
            if not INT_MIN <= value <= INT_MAX:
                self.fail(path, f"integer {value} does not fit in 64 bits")
            return value
        if isinstance(value, float):
            if not self.allow_non_finite and not math.isfinite(value):
                self.fail(path, f"float {value} has no representation")
            return value
        if isinstance(value, dict):
            result = {}
            for k, v in value.items():
                mapped = self.map_key(k, path)
                if mapped in result:
                    self.fail(path, f"duplicate key {mapped!r} after conversion")
                result[mapped] = self.map(v, _child(path, k))
            return result
        if isinstance(value, (list, tuple)):
            return [self.map(item, _child(path, i)) for i, item in enumerate(value)]
        return self.map_other(value, path)

    def map_key(self, key: Any, path: str) -> Any:
        if isinstance(key, str):
            return key
        if isinstance(key, bool):
            return "true" if key else "false"
        if isinstance(key, int):
            return str(key)
        self.fail(path, f"mapping key {key!r} of type {type(key).__name__} must be a string")

    def map_other(self, value: Any, path: str) -> Any:
        self.fail(path, f"value of type {type(value).__name__} has no representation")


class _JsonMapper(_Mapper):
    error = JsonConversionError
    allow_non_finite = False

    def map_other(self, value: Any, path: str) -> Any:
        # datetime is a subclass of date
        if isinstance(value, (date, time)):
            return value.isoformat()
        return super().map_other(value, path)


class _YamlMapper(_Mapper):
    error = YamlConversionError

    def map_key(self, key: Any, path: str) -> Any:
        return key

    def map_other(self, value: Any, path: str) -> Any:
        if isinstance(value, time):
            return value.isoformat()
        if isinstance(value, (date, bytes)):
            return value
        if isinstance(value, (set, frozenset)):
            members = set()
            for item in value:
                mapped = self.map(item, path)
                try:
                    members.add(mapped)
                except TypeError:
                    self.fail(path, f"set member {item!r} has no hashable representation")
            return members
        return super().map_other(value, path)


class _TomlMapper(_Mapper):
    error = TomlConversionError
    allow_null = False

    def __call__(self, value: Any) -> Any:
        if not isinstance(value, dict):
            self.fail("$", f"top-level value must be a table, not {type(value).__name__}")
        return super().__call__(value)

    def map_other(self, value: Any, path: str) -> Any:
        if isinstance(value, (date, time)):
            return value
        return super().map_other(value, path)


to_json_value: Callable[[Any], Any] = _JsonMapper()
to_yaml_value: Callable[[Any], Any] = _YamlMapper()
to_toml_value: Callable[[Any], Any] = _TomlMapper()

MAPPERS: Dict[FormatKind, Callable[[Any], Any]] = {
    FormatKind.JSON: to_json_value,
    FormatKind.YAML: to_yaml_value,
    FormatKind.TOML: to_toml_value,
}


def copy_tree(value: Any, error: Callable[[str], Exception]) -> Any:
    """Deep-copy a value tree, raising ``error`` when it is nested too deeply to copy."""
    try:
        return copy.deepcopy(value)
    except RecursionError as e:
        raise error("value nested too deeply to copy") from e
