"""
Placeholder substitution and display formatting for scanned statements.

The heuristic layout is plain text replacement: it does not parse SQL, so a
keyword inside a string literal (``'from here'``) is split like any other.
The ``pretty`` mode hands the statement to sqlglot instead and falls back to
the heuristic whenever sqlglot cannot parse it.
"""
import logging
import re
from typing import Optional, Sequence

from .parameters import Parameter
from .utils.parser_utils import safe_pretty_print
from .value_formatter import format_parameter

logger = logging.getLogger(__name__)

PLACEHOLDER = '?'

DISPLAY_HEURISTIC = 'heuristic'
DISPLAY_PRETTY = 'pretty'
DISPLAY_MODES = (DISPLAY_HEURISTIC, DISPLAY_PRETTY)

# Applied in order. The surrounding whitespace run is replaced as a whole so
# that formatting already formatted text leaves it unchanged.
_LINE_BREAK_RULES = [
    (re.compile(r"\s+SELECT\s+", re.IGNORECASE), '\nSELECT '),
    (re.compile(r"\s+FROM\s+", re.IGNORECASE), '\nFROM '),
    (re.compile(r"\s+WHERE\s+", re.IGNORECASE), '\nWHERE '),
    (re.compile(r"\s+AND\s+", re.IGNORECASE), '\n  AND '),
    (re.compile(r"\s+OR\s+", re.IGNORECASE), '\n  OR '),
    (re.compile(r"\s+LEFT JOIN\s+", re.IGNORECASE), '\nLEFT JOIN '),
    (re.compile(r"\s+INNER JOIN\s+", re.IGNORECASE), '\nINNER JOIN '),
    (re.compile(r"\s+INSERT INTO\s+", re.IGNORECASE), '\nINSERT INTO '),
    (re.compile(r"\s+VALUES\s+", re.IGNORECASE), '\nVALUES '),
]


def substitute_placeholders(template: str, parameters: Sequence[Parameter]) -> str:
    """
    Replace the template's ``?`` placeholders, left to right, with formatted values.

    Placeholders beyond the last parameter stay literal. Inserted values are
    not scanned again, so a value containing ``?`` does not consume a parameter.
    """
    if not parameters:
        return template

    pieces = template.split(PLACEHOLDER)
    result = [pieces[0]]
    for index, piece in enumerate(pieces[1:]):
        if index < len(parameters):
            result.append(format_parameter(parameters[index]))
        else:
            result.append(PLACEHOLDER)
        result.append(piece)
    return ''.join(result)


def format_sql_display(sql: str) -> str:
    """Break lines before the main clause keywords and indent AND/OR."""
    if not sql:
        return ''
    for pattern, replacement in _LINE_BREAK_RULES:
        sql = pattern.sub(replacement, sql)
    return sql.strip()


def ensure_terminated(sql: str) -> str:
    if sql.rstrip().endswith(';'):
        return sql
    return sql + ';'


def format_statement(sql: str, display_mode: str = DISPLAY_HEURISTIC, dialect: Optional[str] = None) -> str:
    """
    Lay out one substituted statement and terminate it with ``;``.

    Args:
        sql: Statement with parameters already substituted.
        display_mode: ``heuristic`` (keyword line breaks) or ``pretty`` (sqlglot).
        dialect: sqlglot dialect used by ``pretty`` mode.

    Returns:
        The formatted statement ending with a semicolon.
    """
    if display_mode == DISPLAY_PRETTY:
        pretty_sql, err = safe_pretty_print(sql, dialect)
        if err:
            logger.warning("Pretty display unavailable, using keyword layout: %s", err)
        else:
            return ensure_terminated(pretty_sql.strip())

    return ensure_terminated(format_sql_display(sql))
