"""
Unit tests for SQL core utilities: identifier quoting and placeholders.
"""

import pytest

from sqlforge.sql.core.identifier import quote_identifier
from sqlforge.sql.core.parameters import format_placeholder


class TestQuoteIdentifier:
    """Tests for quote_identifier function."""

    def test_quote_ascii_column(self):
        """ASCII column names should be double-quoted."""
        assert quote_identifier("company_id") == '"company_id"'

    def test_quote_chinese_column(self):
        """Non-ASCII column names should be double-quoted."""
        assert quote_identifier("年金计划号") == '"年金计划号"'

    def test_quote_with_internal_quotes(self):
        """Internal double quotes should be escaped by doubling."""
        assert quote_identifier('column"name') == '"column""name"'

    def test_quote_injection_attempt_stays_inside_identifier(self):
        """A name trying to close the identifier stays one identifier."""
        assert quote_identifier('x"; DROP TABLE t; --') == '"x""; DROP TABLE t; --"'

    def test_custom_quote_char(self):
        """Other quote characters are wrapped and escaped the same way."""
        assert quote_identifier("column`name", quote_char="`") == "`column``name`"


class TestFormatPlaceholder:
    """Tests for format_placeholder function."""

    def test_dollar_placeholder(self):
        assert format_placeholder(1) == "$1"
        assert format_placeholder(12) == "$12"

    def test_question_mark_placeholder(self):
        assert format_placeholder(3, prefix="?") == "?3"

    def test_zero_position_rejected(self):
        """Positions are 1-based."""
        with pytest.raises(ValueError):
            format_placeholder(0)
