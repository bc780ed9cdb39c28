"""
Whitespace normalization for assembled prompt text.
"""

import re
from typing import Optional


_BLANK_LINE_RUN = re.compile(r"\n{3,}")
_SPACE_RUN = re.compile(r" {2,}")


def cleanup_output(text: Optional[str]) -> str:
    """Normalize whitespace in a fully assembled prompt.

    Steps, in order:
    1. Strip trailing spaces and tabs from every line.
    2. Collapse runs of three or more newlines to two.
    3. Replace tabs with single spaces.
    4. Collapse runs of spaces to a single space.
    5. Trim the whole result.

    Indentation and column alignment are not preserved; prompts are prose.

    Args:
        text: The text to clean, may be None.

    Returns:
        The cleaned text, "" for None or empty input.
    """
    if not text:
        return ""

    text = "\n".join(line.rstrip(" \t") for line in text.split("\n"))
    text = _BLANK_LINE_RUN.sub("\n\n", text)
    text = text.replace("\t", " ")
    text = _SPACE_RUN.sub(" ", text)
    return text.strip()
