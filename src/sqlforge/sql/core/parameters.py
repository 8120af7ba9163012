"""
SQL parameter placeholder utilities.

Placeholders are positional and 1-based: the N-th value appended during a
render pass is referenced by placeholder N.
"""


def format_placeholder(position: int, prefix: str = "$") -> str:
    """
    Format a numbered positional placeholder.

    Args:
        position: 1-based position of the bound value
        prefix: Dialect marker preceding the number

    Returns:
        Placeholder text

    Examples:
        >>> format_placeholder(1)
        '$1'
        >>> format_placeholder(3, prefix="?")
        '?3'
    """
    if position < 1:
        raise ValueError(f"placeholder position must be >= 1, got {position}")
    return f"{prefix}{position}"

