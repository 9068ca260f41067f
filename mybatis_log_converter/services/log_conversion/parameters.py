"""
Parsing of the text that follows ``Parameters:`` in a MyBatis debug log.

MyBatis prints bound values as ``value(Type)`` separated by commas, e.g.
``1(Integer), John(String), null``. Values are split on every comma, so a
string value that itself contains a comma is split into two parameters.
"""
import re
from typing import List, NamedTuple


class Parameter(NamedTuple):
    """One bound value as it appeared in the log, without its ``(Type)`` suffix."""
    value: str
    type: str


# Greedy value so that ``f(x)(String)`` keeps ``f(x)`` as the value.
_TYPED_VALUE_RE = re.compile(r"^(.+)\(([^)]+)\)$")


def parse_parameters_line(params_str: str) -> List[Parameter]:
    """
    Split a ``Parameters:`` payload into ordered parameters.

    Args:
        params_str: Trimmed text after ``Parameters:``.

    Returns:
        List of Parameter. Segments without a trailing ``(Type)`` group keep
        the whole segment as value and an empty type.
    """
    if not params_str:
        return []

    parameters = []
    for segment in params_str.split(','):
        trimmed = segment.strip()
        match = _TYPED_VALUE_RE.match(trimmed)
        if match:
            parameters.append(Parameter(match.group(1).strip(), match.group(2).strip()))
        else:
            parameters.append(Parameter(trimmed, ''))
    return parameters
