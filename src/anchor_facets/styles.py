"""Unicode "font" styling with Mathematical Alphanumeric Symbols.

Post text has no markup, so emphasis is faked by swapping ASCII letters and
digits for their styled code points. Every styled character is 3 or 4 UTF-8
bytes but still a single visible character.
"""

from __future__ import annotations


def _alphabet_table(
    upper_start: int,
    lower_start: int,
    digit_start: int,
    holes: dict[str, str] | None = None,
) -> dict[int, str]:
    table = {}
    for i in range(26):
        table[ord("A") + i] = chr(upper_start + i)
        table[ord("a") + i] = chr(lower_start + i)
    for i in range(10):
        table[ord("0") + i] = chr(digit_start + i)
    # Letters encoded outside the block (Letterlike Symbols)
    for char, replacement in (holes or {}).items():
        table[ord(char)] = replacement
    return table


# There are no italic digits; sans-serif ones are the closest match.
_ITALIC = _alphabet_table(0x1D434, 0x1D44E, 0x1D7E2, holes={"h": "\u210e"})
_BOLD_ITALIC = _alphabet_table(0x1D468, 0x1D482, 0x1D7CE)


def to_italic(text: str) -> str:
    return text.translate(_ITALIC)


def to_bold_italic(text: str) -> str:
    return text.translate(_BOLD_ITALIC)


def apply_style(text: str, style: str) -> str:
    """Apply a named style (``plain``, ``italic`` or ``bold_italic``)."""
    if style == "plain":
        return text
    if style == "italic":
        return to_italic(text)
    if style == "bold_italic":
        return to_bold_italic(text)
    raise ValueError(f"Unknown style {style!r}")
