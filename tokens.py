# tokens.py
# Token vocabulary and error types shared by the scanner and the validator.

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

# ---------------------------------------------------------------------------
# TOKEN KINDS
# ---------------------------------------------------------------------------
class TokenKind(Enum):
    LEFT_BRACE    = "{"
    RIGHT_BRACE   = "}"
    LEFT_BRACKET  = "["
    RIGHT_BRACKET = "]"
    COLON         = ":"
    COMMA         = ","
    STRING        = "string"
    NUMBER        = "number"
    TRUE          = "true"
    FALSE         = "false"
    NULL          = "null"
    EOF           = "end of input"

    def __str__(self):
        return self.name


# Single-character punctuation maps 1:1 onto its token kind.
PUNCTUATION = {
    kind.value: kind
    for kind in (
        TokenKind.LEFT_BRACE,
        TokenKind.RIGHT_BRACE,
        TokenKind.LEFT_BRACKET,
        TokenKind.RIGHT_BRACKET,
        TokenKind.COLON,
        TokenKind.COMMA,
    )
}

KEYWORDS = {
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "null": TokenKind.NULL,
}

SCALAR_KINDS = frozenset({
    TokenKind.STRING,
    TokenKind.NUMBER,
    TokenKind.TRUE,
    TokenKind.FALSE,
    TokenKind.NULL,
})

# ---------------------------------------------------------------------------
# TOKEN RECORD
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Token:
    """
    Immutable token record: kind, payload and absolute offset.

    Only STRING (decoded text) and NUMBER (int or float) carry a payload.
    The offset is kept for error messages and is left out of equality, so
    two tokens compare equal when kind and payload match.
    """
    kind: TokenKind
    value: Optional[Union[str, int, float]] = None
    offset: int = field(default=0, compare=False)

    def describe(self) -> str:
        if self.kind in (TokenKind.STRING, TokenKind.NUMBER):
            return f"{self.kind} {self.value!r}"
        return str(self.kind)

# ---------------------------------------------------------------------------
# ERRORS
# ---------------------------------------------------------------------------
class JSONSyntaxError(SyntaxError):
    """Base class for every rejection raised while checking a document."""

    def __init__(self, message: str, offset: Optional[int] = None):
        if offset is not None:
            message = f"{message} at offset {offset}"
        super().__init__(message)
        self.pos = offset


class LexError(JSONSyntaxError):
    """Malformed lexeme: bad character, string, number or keyword."""


class ParseError(JSONSyntaxError):
    """Token sequence does not follow the grammar."""


class NestingTooDeep(ParseError):
    pass
