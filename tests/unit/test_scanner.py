"""Tests for pairing ``Preparing:`` templates with ``Parameters:`` lines."""

from mybatis_log_converter.services.log_conversion.parameters import Parameter
from mybatis_log_converter.services.log_conversion.scanner import Statement, scan_statements, split_log_lines


def test_split_log_lines_trims_and_drops_blank_lines() -> None:
    assert split_log_lines("  a  \r\n\n   \n\tb\n") == ["a", "b"]


def test_adjacent_pair_becomes_statement() -> None:
    log = "==>  Preparing: SELECT * FROM t WHERE id = ?\n==> Parameters: 1(Integer)\n<==      Total: 1"

    assert scan_statements(log) == [Statement("SELECT * FROM t WHERE id = ?", (Parameter("1", "Integer"),))]


def test_prefixed_log_lines(user_lookup_log: str) -> None:
    statements = scan_statements(user_lookup_log)

    assert len(statements) == 1
    assert statements[0].preparing_template == "SELECT * FROM t WHERE id = ? AND name = ?"
    assert statements[0].parameters == (Parameter("1", "Integer"), Parameter("John", "String"))


def test_preparing_followed_by_preparing_is_flushed_without_parameters() -> None:
    log = (
        "Preparing: SELECT 1 FROM a WHERE x = ?\n"
        "Preparing: SELECT 2 FROM b WHERE y = ?\n"
        "Parameters: 2(Integer)\n"
    )

    assert scan_statements(log) == [
        Statement("SELECT 1 FROM a WHERE x = ?", ()),
        Statement("SELECT 2 FROM b WHERE y = ?", (Parameter("2", "Integer"),)),
    ]


def test_trailing_preparing_is_flushed_at_end_of_input() -> None:
    assert scan_statements("== Preparing: DELETE FROM t WHERE id = ?") == [Statement("DELETE FROM t WHERE id = ?", ())]


def test_orphan_parameters_are_dropped() -> None:
    log = (
        "==> Parameters: 9(Integer)\n"
        "==>  Preparing: SELECT * FROM t WHERE id = ?\n"
        "==> Parameters: 1(Integer)\n"
        "==> Parameters: 2(Integer)\n"
    )

    assert scan_statements(log) == [Statement("SELECT * FROM t WHERE id = ?", (Parameter("1", "Integer"),))]


def test_non_adjacent_parameters_still_pair_after_ignored_lines() -> None:
    log = (
        "==>  Preparing: SELECT * FROM t WHERE id = ?\n"
        "some unrelated framework output\n"
        "==> Parameters: 5(Long)\n"
    )

    assert scan_statements(log) == [Statement("SELECT * FROM t WHERE id = ?", (Parameter("5", "Long"),))]


def test_empty_template_is_not_a_statement() -> None:
    assert scan_statements("==>  Preparing:   \n==> Parameters: 1(Integer)") == []


def test_text_without_markers_yields_nothing() -> None:
    assert scan_statements("just some text\nand more") == []


def test_empty_parameters_line_pairs_with_empty_list() -> None:
    assert scan_statements("Preparing: SELECT now()\nParameters: ") == [Statement("SELECT now()", ())]
