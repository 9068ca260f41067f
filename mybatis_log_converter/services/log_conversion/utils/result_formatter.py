"""
Result formatting utilities for log conversion.
Handles creation of the response dictionaries returned by the API.
"""
from typing import Optional

from ..converter import ConversionResult


def create_result_dictionary(result: ConversionResult, display_mode: str, dialect: Optional[str] = None, **kwargs) -> dict:
    """
    Create standardized result dictionary for a conversion request.

    Args:
        result: Conversion result returned by the converter
        display_mode: Display mode the statements were laid out with
        dialect: sqlglot dialect used for pretty display (optional)
        **kwargs: Additional keys merged into the dictionary

    Returns:
        Dictionary with ``sql``, ``success``, ``statement_count``, the
        display settings and ``error`` only when the conversion reported one
    """
    data = {
        **result.to_dict(),
        "display_mode": display_mode,
    }

    if dialect:
        data["dialect"] = dialect
    data.update(kwargs)

    return data
