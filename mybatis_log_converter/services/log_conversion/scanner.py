"""
Line scanner that pairs ``Preparing:`` templates with their ``Parameters:``.

Only adjacent pairs are recognised. A ``Preparing:`` line that is followed by
another ``Preparing:`` (or by the end of the text) becomes a statement with no
parameters; a ``Parameters:`` line with nothing pending is dropped.
"""
import logging
import re
from typing import List, NamedTuple, Optional, Tuple

from .parameters import Parameter, parse_parameters_line

logger = logging.getLogger(__name__)

PREPARING_MARKER = 'Preparing:'
PARAMETERS_MARKER = 'Parameters:'

# MyBatis prefixes the lines it sends to the driver with "==>".
_ARROW_PREFIX_RE = re.compile(r"^==>?\s*")


class Statement(NamedTuple):
    preparing_template: str
    parameters: Tuple[Parameter, ...] = ()


def split_log_lines(log_text: str) -> List[str]:
    """Split raw text into trimmed, non-empty lines."""
    return [line.strip() for line in log_text.split('\n') if line.strip()]


def _strip_arrow_prefix(line: str) -> str:
    return _ARROW_PREFIX_RE.sub('', line, count=1)


def scan_statements(log_text: str) -> List[Statement]:
    """
    Extract statements from raw MyBatis log text in the order they appear.

    Args:
        log_text: Multi-line log text as pasted by the user.

    Returns:
        List of Statement. Templates never matched with a parameter line
        carry an empty parameter tuple.
    """
    statements: List[Statement] = []
    pending: Optional[str] = None

    for line in split_log_lines(log_text):
        clean_line = _strip_arrow_prefix(line)

        if PREPARING_MARKER in clean_line:
            if pending:
                logger.debug("Preparing line without parameters: %s", pending)
                statements.append(Statement(pending))
            pending = clean_line.split(PREPARING_MARKER)[1].strip()

        elif PARAMETERS_MARKER in clean_line:
            params = parse_parameters_line(clean_line.split(PARAMETERS_MARKER)[1].strip())
            if pending:
                statements.append(Statement(pending, tuple(params)))
                pending = None
            else:
                logger.debug("Dropping orphan parameters line with %d value(s)", len(params))

    if pending:
        statements.append(Statement(pending))

    return statements
