"""
JSON pretty-printing for response bodies.
"""

import json
import math
from typing import Any


INDENT = 2


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {literal}")
    return value


def pretty_print(text: str) -> str:
    """
    Re-serialize JSON text with indentation, or return it unchanged.

    Object keys keep the order they had in the source. Text that is not
    strict JSON is returned as-is, including numbers too large for a
    float and strings holding unpaired surrogate escapes. Output of this
    function formats to itself.

    Example:
        >>> print(pretty_print('{"b":1,"a":[true]}'))
        {
          "b": 1,
          "a": [
            true
          ]
        }
        >>> pretty_print("not json")
        'not json'
        >>> pretty_print("[1e400]")
        '[1e400]'
    """
    try:
        value = json.loads(text, parse_constant=_reject_constant, parse_float=_parse_finite_float)
        formatted = json.dumps(value, indent=INDENT, ensure_ascii=False)
        formatted.encode("utf-8")
    except (ValueError, RecursionError):
        return text
    return formatted
