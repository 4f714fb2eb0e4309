"""Streaming lexer for PEXL expressions with one token of lookahead."""

import logging
from typing import Iterator, List

from pexl.pexl_error import PexlTokenError
from pexl.pexl_matcher import match_any
from pexl.pexl_token import PexlToken


class PexlLexer:
    """
    Lexes a PEXL expression one token at a time.

    The lexer keeps a cursor into the caller's text and always holds the next token
    (the lookahead) ready, so `peek_next_token` never does any work.  Scanning stops
    for good at the end of the input or at the first character no matcher accepts.
    By default the two cases look the same to the caller; `error_position` tells
    them apart, and in strict mode running into unrecognized input raises
    `PexlTokenError`.
    """

    _logger = logging.getLogger("PexlLexer")

    def __init__(self, text: str, strict: bool = False) -> None:
        """
        Initialize the lexer and scan the first token.

        Args:
            text: The expression text to lex
            strict: If True, raise PexlTokenError on unrecognized input instead of
                silently ending the token stream
        """
        self._input = text
        self._input_len = len(text)
        self._position = 0
        self._strict = strict
        self._error_position: int | None = None
        self._lookahead: PexlToken | None = self._scan()

    def _skip_whitespace(self) -> None:
        """
        Advance past any whitespace at the current position.
        """
        while self._position < self._input_len and self._input[self._position].isspace():
            self._position += 1

    def _scan(self) -> PexlToken | None:
        """
        Scan one token from the current position.

        Returns:
            The token found, or None if the input is exhausted or unrecognized.  In the
            None case the cursor is moved to the end of the input.
        """
        self._skip_whitespace()
        if self._position >= self._input_len:
            return None

        result = match_any(self._input, self._position)
        if result is None:
            self._error_position = self._position
            self._logger.debug(
                "stopped on unrecognized input %r at position %d",
                self._input[self._position],
                self._position
            )
            self._position = self._input_len
            return None

        self._position = result.end
        return result.token

    def _raise_if_stopped_on_error(self) -> None:
        """
        Raise PexlTokenError if in strict mode and lexing stopped on unrecognized input.
        """
        if not self._strict or self._lookahead is not None or self._error_position is None:
            return

        ch = self._input[self._error_position]
        if ch in "0123456789":
            end = self._error_position
            while end < self._input_len and self._input[end].isnumeric():
                end += 1

            run = self._input[self._error_position:end]
            if all(c in "0123456789" for c in run):
                raise PexlTokenError(
                    message="Number literal out of range",
                    position=self._error_position,
                    received=f"Digits starting with: {run[:12]}",
                    expected="An integer between 0 and 2147483647"
                )

            raise PexlTokenError(
                message="Invalid number literal",
                position=self._error_position,
                received=f"Numeric characters: {run[:12]}",
                expected="Decimal digits 0-9 only"
            )

        raise PexlTokenError(
            message=f"Invalid character: {ch}",
            position=self._error_position,
            received=f"Character: {ch} (code {ord(ch)})",
            expected="One of ( ) [ ] < > + - * / ! _ ' ? = or a decimal digit"
        )

    def next_token(self) -> PexlToken | None:
        """
        Consume and return the next token.

        Returns:
            The next token, or None if there are no tokens left.  Once None has been
            returned, every later call returns None too.

        Raises:
            PexlTokenError: In strict mode, if lexing stopped on unrecognized input
        """
        self._raise_if_stopped_on_error()

        token = self._lookahead
        if token is not None:
            self._lookahead = self._scan()

        return token

    def peek_next_token(self) -> PexlToken | None:
        """
        Return the next token without consuming it.

        Returns:
            The next token, or None if there are no tokens left

        Raises:
            PexlTokenError: In strict mode, if lexing stopped on unrecognized input
        """
        self._raise_if_stopped_on_error()
        return self._lookahead

    @property
    def remaining(self) -> str:
        """The input not yet scanned, i.e. everything after the lookahead token."""
        return self._input[self._position:]

    @property
    def error_position(self) -> int | None:
        """Offset of the unrecognized input that stopped lexing, or None if none was found."""
        return self._error_position

    def __iter__(self) -> Iterator[PexlToken]:
        return self

    def __next__(self) -> PexlToken:
        token = self.next_token()
        if token is None:
            raise StopIteration

        return token


def lex(text: str, strict: bool = False) -> List[PexlToken]:
    """
    Lex a complete PEXL expression.

    Args:
        text: The expression text to lex
        strict: If True, raise on unrecognized input rather than stopping early

    Returns:
        All tokens up to the end of the input or the first unrecognized input

    Raises:
        PexlTokenError: In strict mode, if the input contains unrecognized input
    """
    return list(PexlLexer(text, strict=strict))
