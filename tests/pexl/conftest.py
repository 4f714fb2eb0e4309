"""Shared fixtures and utilities for PEXL tests."""

from typing import List

import pytest

from pexl import PexlLexer, PexlToken, PexlTokenType


@pytest.fixture
def make_lexer():
    """Factory for lexers over a given text."""
    def _create_lexer(text: str, strict: bool = False) -> PexlLexer:
        return PexlLexer(text, strict=strict)
    return _create_lexer


class PexlTestHelpers:
    """Helper utilities for PEXL testing."""

    @staticmethod
    def tok(token_type: PexlTokenType) -> PexlToken:
        """Build a payload-free token."""
        return PexlToken(token_type)

    @staticmethod
    def num(value: int) -> PexlToken:
        """Build a NUMBER token."""
        return PexlToken(PexlTokenType.NUMBER, value)

    @staticmethod
    def drain(lexer: PexlLexer) -> List[PexlToken]:
        """Consume every token using next_token()."""
        tokens = []
        while True:
            token = lexer.next_token()
            if token is None:
                return tokens

            tokens.append(token)


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return PexlTestHelpers
