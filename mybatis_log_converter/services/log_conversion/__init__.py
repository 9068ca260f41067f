"""
Log Conversion Package - MyBatis debug log to SQL conversion.

Main Components:
    - LogConverter / convert_mybatis_log: Main entry point for conversions
    - scanner: Pairs ``Preparing:`` templates with ``Parameters:`` lines
    - parameters: Parses ``value(Type)`` parameter lists
    - value_formatter: Renders parameters as SQL literals by declared type
    - display: Placeholder substitution and statement layout

Usage:
    from mybatis_log_converter.services.log_conversion import convert_mybatis_log

    result = convert_mybatis_log(log_text)
    if result.success:
        print(result.sql)
"""

from .converter import (
    ConversionResult,
    InputTooLarge,
    InvalidConversionRequest,
    LogConverter,
    NO_VALID_LOG_MESSAGE,
    convert_mybatis_log,
)

__all__ = [
    'ConversionResult',
    'InputTooLarge',
    'InvalidConversionRequest',
    'LogConverter',
    'NO_VALID_LOG_MESSAGE',
    'convert_mybatis_log',
]
