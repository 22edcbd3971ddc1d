"""
JSON Utilities
==============

orjson-backed helpers used for configuration files.
"""

import logging
from typing import Any, Union

import orjson

logger = logging.getLogger(__name__)


def dumps(obj: Any, sort_keys: bool = False, indent: bool = False) -> str:
    """
    Serialize object to JSON string using orjson.

    Args:
        obj: Object to serialize
        sort_keys: Whether to sort dictionary keys
        indent: Pretty-print with two-space indentation

    Returns:
        JSON string
    """
    option = 0
    if sort_keys:
        option |= orjson.OPT_SORT_KEYS
    if indent:
        option |= orjson.OPT_INDENT_2

    # orjson returns bytes, decode to string for compatibility
    return orjson.dumps(obj, option=option).decode("utf-8")


def loads(s: Union[str, bytes]) -> Any:
    """Deserialize a JSON string or bytes."""
    return orjson.loads(s)
