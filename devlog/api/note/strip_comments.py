"""Clean up editor output for a note."""


def strip_comments(text: str) -> str:
    """Drop lines starting with ``#`` and trim surrounding whitespace."""
    kept = [line for line in text.split("\n") if not line.startswith("#")]
    return "\n".join(kept).strip()
