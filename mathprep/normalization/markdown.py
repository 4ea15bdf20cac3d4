"""
Minimal Markdown fixes: multiple-choice list items and hard line breaks.

Both passes skip what they produced on an earlier run, so normalized
text goes through them unchanged.
"""

import re

# "(A)" style markers, optionally on their own line; not already a list item
_PAREN_OPTION_PATTERN = re.compile(r"(\n)?\s*(?<!- )\(([A-D])\)\s*")

# "A." / "A、" style markers
_DOT_OPTION_PATTERN = re.compile(r"(\n)?\s*(?<!- )([A-D])[.、]\s*")

# A single newline that is not part of a paragraph break or already a hard break
_SOFT_BREAK_PATTERN = re.compile(r"([^\n])(?<!  )\n(?!\n)")


def format_options(text: str) -> str:
    """Rewrite inline multiple-choice markers into `- (X) ` / `- X. ` list items."""
    text = _PAREN_OPTION_PATTERN.sub(r"\n- (\2) ", text)
    text = _DOT_OPTION_PATTERN.sub(r"\n- \2. ", text)
    # Input arrives trimmed; only a newline added above can lead
    return text.lstrip("\n")


def normalize_line_breaks(text: str) -> str:
    """
    Turn single newlines into Markdown hard breaks.

    Paragraph breaks (blank lines) and lines already ending in two
    spaces are left as they are.
    """
    return _SOFT_BREAK_PATTERN.sub("\\1  \n", text)
