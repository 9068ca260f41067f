import sqlglot
import logging

logger = logging.getLogger(__name__)

def safe_pretty_print(sql: str, dialect: str | None) -> tuple[str | None, str | None]:
    """
    Safely pretty-prints SQL text with sqlglot.

    Args:
        sql: The SQL text to render.
        dialect: The sqlglot dialect to read and write with (None for the generic one).

    Returns:
        A tuple containing (pretty_sql, error_message).
        If successful, pretty_sql is the rendered text and error_message is None.
        If it fails, pretty_sql is None and error_message is a formatted error string.
    """
    try:
        rendered = sqlglot.transpile(sql, read=dialect, write=dialect, pretty=True)
    except Exception as e:
        logger.warning(f"Failed to pretty-print statement: {e}", exc_info=True)
        return None, f"Failed to parse statement due to: {e}"

    rendered = [stmt for stmt in rendered if stmt.strip()]
    if not rendered:
        return None, "Parser returned no statement"
    return ";\n".join(rendered), None
