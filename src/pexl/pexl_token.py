"""Token types and token representation for PEXL expressions."""

from dataclasses import dataclass, field
from enum import Enum


class PexlTokenType(Enum):
    """Token types for PEXL expressions."""
    LPAREN = "("
    RPAREN = ")"
    LBRACKET = "["
    RBRACKET = "]"
    LANGLE = "<"
    RANGLE = ">"
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"
    BANG = "!"
    UNDERSCORE = "_"
    APOSTROPHE = "'"
    QUESTION = "?"
    EQUALS = "="
    NUMBER = "NUMBER"


@dataclass(frozen=True)
class PexlToken:
    """
    Represents a single token in a PEXL expression.

    Attributes:
        type: The kind of token
        value: The integer value for NUMBER tokens, None for everything else
        start: Character offset of the lexeme in the scanned text (not part of equality)
    """
    type: PexlTokenType
    value: int | None = None
    start: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        if self.type is PexlTokenType.NUMBER:
            return f"PexlToken(NUMBER, {self.value!r}, pos={self.start})"

        return f"PexlToken({self.type.name}, pos={self.start})"


@dataclass(frozen=True)
class PexlScanResult:
    """
    The outcome of one successful match.

    Holds the source text and the offset just past the matched lexeme rather than
    a copy of the remaining input; `rest` builds that view on demand.
    """
    token: PexlToken
    text: str = field(repr=False)
    end: int

    @property
    def rest(self) -> str:
        """The input left over after the matched lexeme."""
        return self.text[self.end:]
