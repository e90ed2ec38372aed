"""Naive SQL "detection" by case-sensitive substring match.

No tokenization, no case folding, no word boundaries: "select" slips
through while "DROPPED" is flagged.
"""

SQL_KEYWORDS = ("SELECT", "DROP")


def find_sql_keywords(text: str) -> list[str]:
    """Keywords from SQL_KEYWORDS present in text, in SQL_KEYWORDS order."""
    return [kw for kw in SQL_KEYWORDS if kw in text]


def is_sql_query(text: str) -> bool:
    return bool(find_sql_keywords(text))
