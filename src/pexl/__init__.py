"""PEXL (Parenthesized EXpression Lexer) package."""

# Main API
from pexl.pexl_lexer import PexlLexer, lex

# Exceptions
from pexl.pexl_error import PexlError, PexlTokenError

# Tokens
from pexl.pexl_token import PexlToken, PexlTokenType, PexlScanResult

# Lower-level components (for advanced usage)
from pexl.pexl_matcher import (
    INT32_MAX, MATCHERS, match_any, match_char,
    match_left_paren, match_right_paren, match_left_bracket, match_right_bracket,
    match_left_angle, match_right_angle, match_plus, match_minus, match_asterisk,
    match_slash, match_bang, match_underscore, match_apostrophe, match_question,
    match_equals, match_number
)


__all__ = [
    # Main API
    "PexlLexer", "lex",

    # Exceptions
    "PexlError", "PexlTokenError",

    # Tokens
    "PexlToken", "PexlTokenType", "PexlScanResult",

    # Lower-level components
    "INT32_MAX", "MATCHERS", "match_any", "match_char",
    "match_left_paren", "match_right_paren", "match_left_bracket", "match_right_bracket",
    "match_left_angle", "match_right_angle", "match_plus", "match_minus", "match_asterisk",
    "match_slash", "match_bang", "match_underscore", "match_apostrophe", "match_question",
    "match_equals", "match_number"
]
