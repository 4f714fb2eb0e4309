"""Exception classes for PEXL (Parenthesized EXpression Lexer) with detailed context."""

from typing import Optional


class PexlError(Exception):
    """Base exception for PEXL errors, carrying where and what went wrong."""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        received: Optional[str] = None,
        expected: Optional[str] = None
    ):
        """
        Initialize the error.

        Args:
            message: Core error description
            position: Character offset of the offending input
            received: The input that was found
            expected: The input that would have been accepted
        """
        self.message = message
        self.position = position
        self.received = received
        self.expected = expected

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]

        if self.position is not None:
            parts.append(f"Position: {self.position}")

        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        return "\n".join(parts)


class PexlTokenError(PexlError):
    """Lexing errors with detailed context."""
