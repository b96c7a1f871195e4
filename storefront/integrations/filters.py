"""
Conjunctive equality filters.

The record store accepts filters of the form::

    type = 'low_stock' && product = {:product_id}

i.e. ``field = value`` terms joined with ``&&``. Values are quoted strings,
numbers, ``true``/``false``/``null`` or ``{:name}`` placeholders bound from
the params mapping. Nothing else is supported.
"""

import re
from typing import Any, Dict, List, Optional, Tuple

from storefront.core.exceptions import InvalidFilterError

_TERM = re.compile(
    r"""^\s*(?P<field>[A-Za-z_][A-Za-z0-9_]*)\s*=\s*(?P<value>
        '(?:[^'\\]|\\.)*'
      | "(?:[^"\\]|\\.)*"
      | \{:[A-Za-z_][A-Za-z0-9_]*\}
      | -?\d+(?:\.\d+)?
      | true | false | null
    )\s*$""",
    re.VERBOSE,
)

_LITERALS = {"true": True, "false": False, "null": None}


def _parse_value(raw: str, params: Dict[str, Any]) -> Any:
    if raw[0] in "'\"":
        return re.sub(r"\\(.)", r"\1", raw[1:-1])
    if raw.startswith("{:"):
        name = raw[2:-1]
        if name not in params:
            raise InvalidFilterError(f"Missing filter parameter: {name}")
        return params[name]
    if raw in _LITERALS:
        return _LITERALS[raw]
    return float(raw) if "." in raw else int(raw)


def parse_filter(filter_expr: str, params: Optional[Dict[str, Any]] = None) -> List[Tuple[str, Any]]:
    """Parse ``filter_expr`` into ``(field, value)`` pairs with params bound."""
    params = params or {}
    if not filter_expr or not filter_expr.strip():
        raise InvalidFilterError("Empty filter expression")

    conditions = []
    for term in filter_expr.split("&&"):
        match = _TERM.match(term)
        if not match:
            raise InvalidFilterError(f"Unsupported filter term: {term.strip()!r}")
        conditions.append((match.group("field"), _parse_value(match.group("value"), params)))
    return conditions


def matches(data: Dict[str, Any], conditions: List[Tuple[str, Any]]) -> bool:
    """Whether a record's field data satisfies every condition."""
    return all(data.get(field) == value for field, value in conditions)
