r"""
Delimiter canonicalization and environment wrapping.

After this module runs, every explicit math region uses `$` or `$$`:

  1. Collapse `$` noise (`$$$`, `$ $`) into `$$`
  2. Convert `\[...\]` to `$$...$$` and `\(...\)` to `$...$`
  3. Promote `$\begin{X}...\end{X}$` to block math
  4. Wrap bare `\begin{X}...\end{X}` in `$$` and bare `\left...\right)` in `$`;
     a `\left...\right)` group around an environment goes in `$$`
"""

import re

from .models import map_plain_segments

_DOLLAR_RUN_PATTERN = re.compile(r"\${3,}")
_SPACED_DOLLARS_PATTERN = re.compile(r"\$\s*\$")

# Bracket/paren delimiters and their dollar form, applied in order.
_BRACKET_DELIMITERS = (
    ("\\[", "$$"),
    ("\\]", "$$"),
    ("\\(", "$"),
    ("\\)", "$"),
)

# \begin{X}...\end{X}, shortest span closing the same environment name
_ENVIRONMENT = r"\\begin\{(?P<env>[^}]+)\}[\s\S]*?\\end\{(?P=env)\}"

_INLINE_ENVIRONMENT_PATTERN = re.compile(r"(?<!\$)\$(\s*" + _ENVIRONMENT + r"\s*)\$(?!\$)")
_ENVIRONMENT_PATTERN = re.compile(_ENVIRONMENT)
_LEFT_RIGHT_PATTERN = re.compile(r"\\left[\s\S]*?\\right[)}\]]")


def canonicalize_delimiters(text: str) -> str:
    """
    Collapse dollar noise and convert bracket delimiters to dollar form.

    Substitutions are unconditional; balance is repaired later by the
    re-scan and parity passes.
    """
    text = _DOLLAR_RUN_PATTERN.sub("$$", text)
    text = _SPACED_DOLLARS_PATTERN.sub("$$", text)

    for bracket, dollars in _BRACKET_DELIMITERS:
        text = text.replace(bracket, dollars)

    return text


def _wrap_block_environments(segment: str) -> str:
    return _ENVIRONMENT_PATTERN.sub(lambda m: f"$${m.group(0)}$$", segment)


def _wrap_left_right_environments(segment: str) -> str:
    def wrap(match: re.Match) -> str:
        group = match.group(0)
        if _ENVIRONMENT_PATTERN.search(group):
            return f"$${group}$$"
        return group

    return _LEFT_RIGHT_PATTERN.sub(wrap, segment)


def _wrap_left_right_groups(segment: str) -> str:
    return _LEFT_RIGHT_PATTERN.sub(lambda m: f"${m.group(0)}$", segment)


def wrap_environments(text: str) -> str:
    r"""
    Put LaTeX environments and `\left...\right` groups in math delimiters.

    Environments already inside `$...$` are promoted to `$$...$$`.
    A `\left...\right` group holding a whole environment, such as a
    matrix in parentheses, becomes one block span.
    Anything already inside a math span is left alone so delimiters
    never nest.

    Args:
        text: Text with canonical dollar delimiters.

    Returns:
        Text where every environment and left/right group is delimited.
    """
    text = _INLINE_ENVIRONMENT_PATTERN.sub(lambda m: f"$${m.group(1)}$$", text)
    text = map_plain_segments(text, _wrap_left_right_environments)
    text = map_plain_segments(text, _wrap_block_environments)
    text = map_plain_segments(text, _wrap_left_right_groups)
    return text
