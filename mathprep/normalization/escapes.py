r"""
Escape normalization for LLM output.

Models often emit `\\(` or `\\[` where `\(` / `\[` was meant, and pile up
backslashes when output passes through JSON more than once.
"""

# Over-escaped bracket/paren delimiters and their intended form.
_OVERESCAPED_DELIMITERS = (
    ("\\\\[", "\\["),
    ("\\\\]", "\\]"),
    ("\\\\(", "\\("),
    ("\\\\)", "\\)"),
)


def normalize_escapes(text: str) -> str:
    r"""
    Normalize line endings and collapse redundant backslash escaping.

    Runs to a fixed point: collapsing `\\\\` to `\\` can expose a new
    doubled pair, so the replacement repeats until none remain.

    Args:
        text: Raw model output.

    Returns:
        Trimmed text with single-escaped delimiters and no `\\` pairs.
    """
    if not text:
        return ""

    text = text.replace("\r\n", "\n").strip()

    for escaped, plain in _OVERESCAPED_DELIMITERS:
        text = text.replace(escaped, plain)

    while "\\\\" in text:
        text = text.replace("\\\\", "\\")

    return text
