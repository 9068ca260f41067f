"""LogConverter – turns pasted MyBatis debug logs into runnable-looking SQL.

Pipeline
--------
1. ``scanner``: pair every ``Preparing:`` template with the ``Parameters:``
   line that follows it.
2. ``display``: substitute the placeholders using the type-directed
   formatter, then lay the statement out.
3. Join the statements with a blank line into a ``ConversionResult``.

The conversion never raises on malformed logs: empty input and logs without a
single ``Preparing:`` line come back as unsuccessful results, everything else
is converted on a best-effort basis.
"""
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .display import DISPLAY_HEURISTIC, DISPLAY_MODES, format_statement, substitute_placeholders
from .scanner import scan_statements

logger = logging.getLogger(__name__)

NO_VALID_LOG_MESSAGE = 'No valid MyBatis log found'
STATEMENT_SEPARATOR = '\n\n'


class InvalidConversionRequest(ValueError):
    """Raised when a caller asks for a conversion the converter cannot run."""


class InputTooLarge(InvalidConversionRequest):
    """Raised when the log text exceeds the configured size limit."""


@dataclass(frozen=True)
class ConversionResult:
    sql: str
    success: bool
    error: Optional[str] = None
    statement_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Dictionary form; the ``error`` key is only present when an error is set."""
        data = asdict(self)
        if self.error is None:
            del data['error']
        return data


def convert_mybatis_log(log_text: str, *, display_mode: str = DISPLAY_HEURISTIC, dialect: Optional[str] = None) -> ConversionResult:
    """
    Convert raw MyBatis log text into parameter-substituted SQL.

    Args:
        log_text: Multi-line text containing ``Preparing:``/``Parameters:`` lines.
        display_mode: ``heuristic`` or ``pretty``.
        dialect: sqlglot dialect for ``pretty`` mode.

    Returns:
        ConversionResult with the statements joined by a blank line.

    Raises:
        InvalidConversionRequest: If display_mode is not a known mode.
    """
    if display_mode not in DISPLAY_MODES:
        raise InvalidConversionRequest(f"Unknown display mode '{display_mode}'. Expected one of: {', '.join(DISPLAY_MODES)}")

    if not log_text or not log_text.strip():
        return ConversionResult(sql='', success=False)

    statements = scan_statements(log_text)
    if not statements:
        logger.debug("No Preparing line found in %d characters of input", len(log_text))
        return ConversionResult(sql='', success=False, error=NO_VALID_LOG_MESSAGE)

    results = []
    for statement in statements:
        sql = substitute_placeholders(statement.preparing_template, statement.parameters)
        results.append(format_statement(sql, display_mode, dialect))

    return ConversionResult(
        sql=STATEMENT_SEPARATOR.join(results),
        success=True,
        statement_count=len(results),
    )


class LogConverter:
    """
    Conversion entry point bound to configured defaults.

    Args:
        display_mode: Default display mode for ``convert``.
        dialect: Default sqlglot dialect for ``pretty`` mode.
        max_input_chars: Longest accepted input; None disables the check.
    """
    def __init__(self, display_mode: str = DISPLAY_HEURISTIC, dialect: Optional[str] = None, max_input_chars: Optional[int] = None):
        if display_mode not in DISPLAY_MODES:
            raise InvalidConversionRequest(f"Unknown display mode '{display_mode}'")
        self.display_mode = display_mode
        self.dialect = dialect
        self.max_input_chars = max_input_chars

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "LogConverter":
        converter_cfg = config.get('converter', {}) or {}
        return cls(
            display_mode=converter_cfg.get('display_mode', DISPLAY_HEURISTIC),
            dialect=converter_cfg.get('dialect') or None,
            max_input_chars=converter_cfg.get('max_input_chars'),
        )

    def check_input_size(self, log_text: str) -> None:
        if self.max_input_chars is not None and len(log_text) > self.max_input_chars:
            raise InputTooLarge(f"Log text has {len(log_text)} characters; the limit is {self.max_input_chars}")

    def convert(self, log_text: str, display_mode: Optional[str] = None, dialect: Optional[str] = None) -> ConversionResult:
        self.check_input_size(log_text or '')
        return convert_mybatis_log(
            log_text,
            display_mode=display_mode or self.display_mode,
            dialect=dialect or self.dialect,
        )
