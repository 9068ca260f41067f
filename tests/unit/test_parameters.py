"""Tests for parsing the payload of a ``Parameters:`` line."""

import pytest

from mybatis_log_converter.services.log_conversion.parameters import Parameter, parse_parameters_line


def test_typed_values_keep_order() -> None:
    assert parse_parameters_line("1(Integer), John(String)") == [
        Parameter("1", "Integer"),
        Parameter("John", "String"),
    ]


def test_empty_payload_yields_no_parameters() -> None:
    assert parse_parameters_line("") == []


def test_value_without_type_annotation() -> None:
    assert parse_parameters_line("null") == [Parameter("null", "")]


def test_value_and_type_are_trimmed() -> None:
    assert parse_parameters_line("  42 ( Long ) ") == [Parameter("42", "Long")]


def test_parenthesised_value_keeps_inner_group() -> None:
    assert parse_parameters_line("f(x)(String)") == [Parameter("f(x)", "String")]


def test_timestamp_value_with_spaces() -> None:
    assert parse_parameters_line("2024-01-01 10:00:00.0(Timestamp)") == [
        Parameter("2024-01-01 10:00:00.0", "Timestamp")
    ]


def test_empty_segments_are_kept() -> None:
    assert parse_parameters_line("a,,b") == [Parameter("a", ""), Parameter("", ""), Parameter("b", "")]


def test_comma_inside_value_splits_the_value() -> None:
    # Known limitation: values are split on every comma.
    assert parse_parameters_line("Smith, John(String)") == [Parameter("Smith", ""), Parameter("John", "String")]


@pytest.mark.parametrize("payload", ["()", "(String)"])
def test_type_group_without_value_is_plain_value(payload: str) -> None:
    assert parse_parameters_line(payload) == [Parameter(payload, "")]
