"""
Single-token matchers for PEXL expressions.

Each matcher looks at `text` starting at `pos` and either recognizes its lexeme there,
returning the token and the position just past it, or returns None without consuming
anything.  Matchers never skip whitespace; that is the lexer's job.
"""

from typing import Callable, Dict, Set, Tuple

from pexl.pexl_token import PexlScanResult, PexlToken, PexlTokenType


Matcher = Callable[[str, int], PexlScanResult | None]

INT32_MAX = 2**31 - 1

_DIGIT_CHARS: Set[str] = set("0123456789")


def match_char(text: str, pos: int, token_type: PexlTokenType) -> PexlScanResult | None:
    """
    Match a single character lexeme.

    Args:
        text: The input text
        pos: Offset to match at
        token_type: Token type whose value is the target character

    Returns:
        The scan result, or None if the character at `pos` is not the target
    """
    if pos >= len(text) or text[pos] != token_type.value:
        return None

    return PexlScanResult(PexlToken(token_type, start=pos), text, pos + 1)


def match_left_paren(text: str, pos: int = 0) -> PexlScanResult | None:
    """Match `(`."""
    return match_char(text, pos, PexlTokenType.LPAREN)


def match_right_paren(text: str, pos: int = 0) -> PexlScanResult | None:
    """Match `)`."""
    return match_char(text, pos, PexlTokenType.RPAREN)


def match_left_bracket(text: str, pos: int = 0) -> PexlScanResult | None:
    """Match `[`."""
    return match_char(text, pos, PexlTokenType.LBRACKET)


def match_right_bracket(text: str, pos: int = 0) -> PexlScanResult | None:
    """Match `]`."""
    return match_char(text, pos, PexlTokenType.RBRACKET)


def match_left_angle(text: str, pos: int = 0) -> PexlScanResult | None:
    """Match `<`."""
    return match_char(text, pos, PexlTokenType.LANGLE)


def match_right_angle(text: str, pos: int = 0) -> PexlScanResult | None:
    """Match `>`."""
    return match_char(text, pos, PexlTokenType.RANGLE)


def match_plus(text: str, pos: int = 0) -> PexlScanResult | None:
    """Match `+`."""
    return match_char(text, pos, PexlTokenType.PLUS)


def match_minus(text: str, pos: int = 0) -> PexlScanResult | None:
    """Match `-`."""
    return match_char(text, pos, PexlTokenType.MINUS)


def match_asterisk(text: str, pos: int = 0) -> PexlScanResult | None:
    """Match `*`."""
    return match_char(text, pos, PexlTokenType.ASTERISK)


def match_slash(text: str, pos: int = 0) -> PexlScanResult | None:
    """Match `/`."""
    return match_char(text, pos, PexlTokenType.SLASH)


def match_bang(text: str, pos: int = 0) -> PexlScanResult | None:
    """Match `!`."""
    return match_char(text, pos, PexlTokenType.BANG)


def match_underscore(text: str, pos: int = 0) -> PexlScanResult | None:
    """Match `_`."""
    return match_char(text, pos, PexlTokenType.UNDERSCORE)


def match_apostrophe(text: str, pos: int = 0) -> PexlScanResult | None:
    """Match `'`."""
    return match_char(text, pos, PexlTokenType.APOSTROPHE)


def match_question(text: str, pos: int = 0) -> PexlScanResult | None:
    """Match `?`."""
    return match_char(text, pos, PexlTokenType.QUESTION)


def match_equals(text: str, pos: int = 0) -> PexlScanResult | None:
    """Match `=`."""
    return match_char(text, pos, PexlTokenType.EQUALS)


def match_number(text: str, pos: int = 0) -> PexlScanResult | None:
    """
    Match the longest run of numeric characters at `pos` as a decimal number.

    The run covers every character for which `str.isnumeric()` holds, but only
    ASCII digits make a valid number, so `12٣` is rejected as a whole rather than
    matched as `12`.  Signs are never part of a number; `-5` is a MINUS token
    followed by a NUMBER.

    Args:
        text: The input text
        pos: Offset to match at

    Returns:
        A NUMBER scan result, or None if there are no digits at `pos`, the run holds
        anything other than ASCII digits, or the value does not fit in a signed
        32-bit integer
    """
    end = pos
    text_len = len(text)
    while end < text_len and text[end].isnumeric():
        end += 1

    if end == pos:
        return None

    digits = text[pos:end]
    if not all(ch in _DIGIT_CHARS for ch in digits):
        return None

    # Bound the length before converting; int() refuses very long strings.
    significant = digits.lstrip("0")
    if len(significant) > len(str(INT32_MAX)):
        return None

    value = int(digits)
    if value > INT32_MAX:
        return None

    return PexlScanResult(PexlToken(PexlTokenType.NUMBER, value, start=pos), text, end)


# Priority order.  The number matcher must stay last.
MATCHERS: Tuple[Matcher, ...] = (
    match_left_paren,
    match_right_paren,
    match_left_bracket,
    match_right_bracket,
    match_left_angle,
    match_right_angle,
    match_plus,
    match_minus,
    match_asterisk,
    match_slash,
    match_bang,
    match_underscore,
    match_apostrophe,
    match_question,
    match_equals,
    match_number,
)


def _build_dispatch_table() -> Dict[str, Matcher]:
    """
    Map each possible first character to the matcher that handles it.

    Built from MATCHERS so that where two matchers could claim a character the
    earlier one wins, exactly as trying them in order would.
    """
    table: Dict[str, Matcher] = {}
    single_char_types = [t for t in PexlTokenType if t is not PexlTokenType.NUMBER]
    for matcher in MATCHERS:
        if matcher is match_number:
            first_chars: Set[str] = _DIGIT_CHARS

        else:
            first_chars = {t.value for t in single_char_types if matcher(t.value, 0) is not None}

        for ch in first_chars:
            table.setdefault(ch, matcher)

    return table


_DISPATCH: Dict[str, Matcher] = _build_dispatch_table()


def match_any(text: str, pos: int = 0) -> PexlScanResult | None:
    """
    Match whichever token starts at `pos`.

    Gives the same result as trying each of MATCHERS in turn and taking the first
    success, but selects the matcher with a single lookup on the first character.

    Args:
        text: The input text
        pos: Offset to match at

    Returns:
        The scan result, or None if no matcher recognizes the input at `pos`
    """
    if pos >= len(text):
        return None

    matcher = _DISPATCH.get(text[pos])
    if matcher is None:
        return None

    return matcher(text, pos)
