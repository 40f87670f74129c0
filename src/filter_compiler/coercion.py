"""
Value coercion for declared filter types.

Pure-Python helpers with no infrastructure dependencies. Each raw value
(often a string from a query string or JSON body) is converted into the
canonical value bound into the emitted query.
"""

from __future__ import annotations

import datetime
import math
import re
from decimal import Decimal
from typing import Any

from dateutil.parser import isoparse

from .exceptions import CoercionError
from .operators import ValueType

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)


def coerce_value(value: Any, value_type: ValueType | str) -> Any:
    """
    Coerce *value* to the canonical form for *value_type*.

    Lists and tuples are coerced element-wise and returned as a list.

    - ``number`` / ``int``: ``int`` or ``float``; ``int`` does not truncate.
    - ``boolean``: ``True`` only for ``True`` or ``"true"``.
    - ``date``: ISO-8601 input, ``YYYY-MM-DD`` output.
    - ``string`` and anything unrecognised: textual form.

    Raises:
        CoercionError: If the value is not a finite number or a valid date.
    """
    if isinstance(value, list | tuple):
        return [coerce_value(item, value_type) for item in value]

    vt = getattr(value_type, "value", value_type)

    if vt in (ValueType.NUMBER.value, ValueType.INT.value):
        return _coerce_number(value, vt)
    if vt == ValueType.BOOLEAN.value:
        return _coerce_boolean(value)
    if vt == ValueType.DATE.value:
        return _coerce_date(value, vt)
    return _coerce_string(value)


def _coerce_number(value: Any, vt: str) -> int | float:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float | Decimal):
        result: int | float = float(value)
    elif isinstance(value, str):
        result = _parse_number(value.strip(), value, vt)
    else:
        raise CoercionError(f"Invalid number: {value}", value, vt)

    if not math.isfinite(result):
        raise CoercionError(f"Invalid number: {value}", value, vt)
    return result


def _parse_number(text: str, original: Any, vt: str) -> int | float:
    if _INTEGER_RE.fullmatch(text):
        return int(text)
    if _NUMBER_RE.fullmatch(text):
        return float(text)
    raise CoercionError(f"Invalid number: {original}", original, vt)


def _coerce_boolean(value: Any) -> bool:
    return value is True or (isinstance(value, str) and value == "true")


def _coerce_date(value: Any, vt: str) -> str:
    if isinstance(value, datetime.datetime):
        return value.date().isoformat()
    if isinstance(value, datetime.date):
        return value.isoformat()
    if not isinstance(value, str):
        raise CoercionError(f"Invalid date: {value}", value, vt)

    try:
        return isoparse(value).date().isoformat()
    except (ValueError, OverflowError) as err:
        raise CoercionError(f"Invalid date: {value}", value, vt) from err


def _coerce_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    # 1.0 renders as "1"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)
