r"""
CJK handling around math delimiters.

KaTeX-style renderers choke on Chinese inside `\text{}` in math mode and
sometimes glue CJK glyphs onto an adjacent `$`. This module moves the
Chinese text out of inline math and pads delimiters next to CJK.
"""

import re

CJK_RANGE = "\u4e00-\u9fff"

# Single-dollar inline span; the lookarounds keep `$$...$$` blocks out.
_INLINE_SPAN_PATTERN = re.compile(r"(?<!\$)\$([^$]+)\$(?!\$)")

# \text{...} whose content holds at least one CJK character
_CJK_TEXT_COMMAND_PATTERN = re.compile(
    r"\\text\s*\{([^}]*[" + CJK_RANGE + r"][^}]*)\}"
)


def is_cjk_char(char: str) -> bool:
    """Check whether a single character is a CJK unified ideograph."""
    return "\u4e00" <= char <= "\u9fff"


def _split_cjk_text(match: re.Match) -> str:
    inner = match.group(1)
    commands = list(_CJK_TEXT_COMMAND_PATTERN.finditer(inner))
    if not commands:
        return match.group(0)

    parts = []
    last = 0
    for command in commands:
        before = inner[last:command.start()].strip()
        if before:
            parts.append(f"${before}$ ")
        parts.append(command.group(1).strip() + " ")
        last = command.end()

    remaining = inner[last:].strip()
    if remaining:
        parts.append(f"${remaining}$")

    return "".join(parts).strip()


def extract_chinese_text(text: str) -> str:
    r"""
    Move Chinese `\text{...}` content out of inline math.

    Each inline span holding such commands is split into alternating
    math and plain-text runs; e.g. `$a+b \text{其中a为正数}$` becomes
    `$a+b$ 其中a为正数`. Block spans are not touched.

    Args:
        text: Text with canonical dollar delimiters.

    Returns:
        Text with no CJK `\text{}` inside inline math.
    """
    return _INLINE_SPAN_PATTERN.sub(_split_cjk_text, text)


def space_cjk_delimiters(text: str) -> str:
    """Insert a space between every `$` and a directly adjacent CJK character."""
    out = []
    last = len(text) - 1
    for i, char in enumerate(text):
        if char != "$":
            out.append(char)
            continue
        if i > 0 and is_cjk_char(text[i - 1]):
            out.append(" ")
        out.append(char)
        if i < last and is_cjk_char(text[i + 1]):
            out.append(" ")
    return "".join(out)
