"""
Type-directed rendering of MyBatis parameters as SQL literals.

The declared Java type decides how a raw log value is written back into the
statement. Formatting is for display: ``It\\'s`` becomes ``'It's'``, which is
readable but not safe to execute as-is.
"""
import re
from typing import Callable, Dict

from .parameters import Parameter

NULL_LITERAL = 'NULL'

STRING_TYPES = ('string', 'char', 'date', 'time', 'timestamp')
BOOLEAN_TYPES = ('boolean',)
NUMERIC_TYPES = ('integer', 'int', 'long', 'short', 'bigdecimal', 'double', 'float')

_EDGE_QUOTES_RE = re.compile(r"^['\"]|['\"]$")

# JavaScript Number() coercion: surrounding whitespace is ignored and blank
# text counts as zero.
_DECIMAL_RE = re.compile(r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)$")
_NON_DECIMAL_RE = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")


def strip_edge_quotes(value: str) -> str:
    """Remove one leading and one trailing quote character, independently."""
    return _EDGE_QUOTES_RE.sub('', value)


def is_numeric_text(value: str) -> bool:
    text = value.strip()
    if not text:
        return True
    return bool(_DECIMAL_RE.match(text) or _NON_DECIMAL_RE.match(text))


def format_string_value(value: str) -> str:
    """
    Render a value as a single-quoted SQL string.

    Args:
        value: Raw log value, possibly already wrapped in quotes.

    Returns:
        The value with outer quotes removed, ``\\'`` unescaped to ``'`` and
        wrapped in one pair of apostrophes. Other escapes are left verbatim.
    """
    cleaned = strip_edge_quotes(value).replace("\\'", "'")
    return f"'{cleaned}'"


def _format_boolean(value: str) -> str:
    return value


def _format_untyped(value: str) -> str:
    if is_numeric_text(value):
        return value
    return format_string_value(value)


_FORMATTERS: Dict[str, Callable[[str], str]] = {}
_FORMATTERS.update({name: format_string_value for name in STRING_TYPES})
_FORMATTERS.update({name: _format_boolean for name in BOOLEAN_TYPES})
_FORMATTERS.update({name: strip_edge_quotes for name in NUMERIC_TYPES})


def format_parameter(parameter: Parameter) -> str:
    """Return the literal text that replaces one ``?`` for *parameter*."""
    if parameter.value in ('null', 'NULL'):
        return NULL_LITERAL

    formatter = _FORMATTERS.get(parameter.type.lower(), _format_untyped)
    return formatter(parameter.value)
