"""LIKE pattern helpers shared by the search and autocomplete queries.

Patterns built here must be passed to ``ilike`` with ``escape=LIKE_ESCAPE``.
"""

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    return (
        (value or "")
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def like_prefix(value: str) -> str:
    """Pattern matching ``value`` literally at the start of a column."""
    return f"{escape_like(value)}%"


def like_contains(value: str) -> str:
    """Pattern matching ``value`` literally anywhere in a column."""
    return f"%{escape_like(value)}%"
