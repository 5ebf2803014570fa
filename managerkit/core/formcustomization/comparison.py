# -*- coding: utf-8 -*-
"""
comparison

Typed equality used when matching rule constraints against object fields.

Every constraint is stored as text while object fields keep their own types,
so both sides are coerced to the field's declared kind before comparing:

* ``INTEGER``: ``None`` and blank strings have no value and only equal each
  other; booleans count as ``0``/``1``; numeric text is parsed (``"5"``,
  ``" 5 "``, ``"5.0"``); anything else never matches.
* ``NUMBER``: used for float and decimal fields; both sides are parsed as
  decimals (``5.0`` equals ``"5"``, ``Decimal("2.50")`` equals ``"2.5"``), with
  the same blank handling as ``INTEGER``.
* ``BOOLEAN``: ``None``, ``""``, ``"0"``, ``"false"``, ``"no"``, ``"off"`` and
  zero are false, every other value is true.
* ``STRING``: ``None`` becomes ``""``, booleans become ``"1"``/``"0"``, other
  values use ``str()``; comparison is exact.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..settings.choices import StrChoices


class FieldKind(StrChoices):
    """Semantic type of a target object field."""

    STRING = ("string", "String")
    INTEGER = ("integer", "Integer")
    NUMBER = ("number", "Number")
    BOOLEAN = ("boolean", "Boolean")

    @classmethod
    def infer(cls, value: Any) -> "FieldKind":
        """Return the kind matching the Python type of ``value``."""
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, (float, Decimal)):
            return cls.NUMBER
        return cls.STRING


_FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})


def to_int(value: Any) -> int | None:
    """Return ``value`` as an integer or ``None`` when it carries no number."""

    if value is None:
        return None
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return int(number) if number.is_integer() else None


def to_number(value: Any) -> Decimal | None:
    """Return ``value`` as a finite decimal or ``None`` when it carries no number."""

    if value is None:
        return None
    if isinstance(value, bool):
        return Decimal(int(value))
    text = str(value).strip()
    if not text:
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def to_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (bool, int, float, Decimal)):
        return bool(value)
    return str(value).strip().lower() not in _FALSE_STRINGS


def to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def coerce_int(value: Any) -> int:
    """Return ``value`` as an integer, falling back to ``0``."""

    number = to_int(value)
    return 0 if number is None else number


def values_equal(kind: FieldKind | str, stored: Any, constraint: Any) -> bool:
    """Compare ``stored`` with ``constraint`` under the rules of ``kind``."""

    if kind == FieldKind.INTEGER:
        left, right = to_int(stored), to_int(constraint)
        if left is None or right is None:
            return left is None and right is None and _blank(stored) and _blank(constraint)
        return left == right
    if kind == FieldKind.NUMBER:
        left_number, right_number = to_number(stored), to_number(constraint)
        if left_number is None or right_number is None:
            return (
                left_number is None
                and right_number is None
                and _blank(stored)
                and _blank(constraint)
            )
        return left_number == right_number
    if kind == FieldKind.BOOLEAN:
        return to_bool(stored) == to_bool(constraint)
    return to_str(stored) == to_str(constraint)


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


__all__ = [
    "FieldKind",
    "coerce_int",
    "to_bool",
    "to_int",
    "to_number",
    "to_str",
    "values_equal",
]


# The End
