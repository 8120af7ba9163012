"""
SQL identifier handling utilities.

Provides proper quoting of SQL identifiers (table names, column names) so
that reserved words, mixed case and non-ASCII names survive, and so that an
embedded quote character cannot terminate the identifier early.
"""


def quote_identifier(name: str, quote_char: str = '"') -> str:
    """
    Quote a SQL identifier (table or column name).

    Args:
        name: The identifier to quote
        quote_char: Quote character of the dialect (double quote by default)

    Returns:
        Properly quoted identifier

    Examples:
        >>> quote_identifier("company_id")
        '"company_id"'
        >>> quote_identifier('column"name')
        '"column""name"'
        >>> quote_identifier("年金计划号")
        '"年金计划号"'
    """
    # Escape internal quote characters by doubling them
    escaped = name.replace(quote_char, quote_char * 2)
    return f"{quote_char}{escaped}{quote_char}"
