"""JMESPath queries over converted JSON values."""

from typing import Any

import jmespath
from jmespath.exceptions import JMESPathError
from jmespath.parser import ParsedResult

from .errors import QueryError
from .logger import get_logger

logger = get_logger(__name__)


def compile_expression(expression: str) -> ParsedResult:
    """
    Compile a JMESPath expression.

    Raises:
        QueryError: If the expression is invalid
    """
    try:
        return jmespath.compile(expression)
    except JMESPathError as e:
        logger.debug(f"Invalid query {expression!r}: {e}")
        raise QueryError(e) from e


def query(value: Any, expression: str) -> Any:
    """
    Evaluate a JMESPath expression against a JSON value.

    Args:
        value: JSON value, e.g. from Transcoder.to_json()
        expression: JMESPath expression

    Returns:
        Query result (None when nothing matches)

    Raises:
        QueryError: If the expression is invalid or fails to evaluate
    """
    compiled = compile_expression(expression)
    try:
        return compiled.search(value)
    except JMESPathError as e:
        logger.debug(f"Query {expression!r} failed: {e}")
        raise QueryError(e) from e
