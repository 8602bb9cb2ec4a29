# lexer.py
# Pull-based JSON scanner: one classified token per next_token() call.
#
# =============================================================================
#  SCANNER
# =============================================================================
#
# The scanner owns the input text and a single forward-only cursor. It has
# no notion of a current token; the validator pulls tokens one at a time
# and nothing is buffered here.
#
# Each lexeme is classified from its first character:
#   { } [ ] : ,    structural punctuation
#   "              string, escapes decoded
#   - or digit     number, checked against the strict numeric pattern
#   ASCII letter   keyword, one of true / false / null
#
# Whitespace is the four JSON whitespace characters only [RFC 8259, sec. 2].
# =============================================================================

import logging
import re
from typing import Iterator, List, Union

from tokens import KEYWORDS, PUNCTUATION, LexError, Token, TokenKind

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CHARACTER CLASSES
# ---------------------------------------------------------------------------
_WHITESPACE  = " \t\n\r"
_DIGITS      = "0123456789"
_HEX_DIGITS  = "0123456789abcdefABCDEF"
_LETTERS     = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_NUMBER_RE   = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")

_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class Scanner:
    """
    Converts JSON text into tokens on demand.

    Once the input is exhausted every further call to next_token() returns
    an EOF token.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def next_token(self) -> Token:
        self._skip_whitespace()
        if self.pos >= len(self.text):
            return Token(TokenKind.EOF, offset=len(self.text))

        start = self.pos
        ch = self.text[start]

        kind = PUNCTUATION.get(ch)
        if kind is not None:
            self.pos += 1
            return Token(kind, offset=start)
        if ch == '"':
            return self._scan_string()
        if ch == "-" or ch in _DIGITS:
            return self._scan_number()
        if ch in _LETTERS:
            return self._scan_keyword()

        raise LexError(f"unexpected character {ch!r}", start)

    def _skip_whitespace(self) -> None:
        text = self.text
        while self.pos < len(text) and text[self.pos] in _WHITESPACE:
            self.pos += 1

    # -----------------------------------------------------------------------
    # STRINGS
    # -----------------------------------------------------------------------
    def _scan_string(self) -> Token:
        """
        Scan a quoted string and decode its escapes.

        Rejects, with the offset of the offending character:
        1) Structure - input ends before the closing quote.
        2) Escape syntax - unknown single escape, short or non-hex \\u escape.
        3) Content - raw control characters and unpaired surrogates.
        """
        text = self.text
        start = self.pos
        i = start + 1
        n = len(text)
        out: List[str] = []

        while True:
            if i >= n:
                raise LexError("unterminated string", start)
            ch = text[i]
            if ch == '"':
                break
            if ch == "\\":
                if i + 1 >= n:
                    raise LexError("unterminated string", start)
                esc = text[i + 1]
                if esc == "u":
                    code = self._read_hex4(i)
                    i += 6
                    if 0xD800 <= code <= 0xDBFF:
                        # High surrogate must be followed by an escaped low one.
                        if text.startswith("\\u", i):
                            low = self._read_hex4(i)
                            if 0xDC00 <= low <= 0xDFFF:
                                code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
                                i += 6
                            else:
                                raise LexError("unpaired surrogate in string", i - 6)
                        else:
                            raise LexError("unpaired surrogate in string", i - 6)
                    elif 0xDC00 <= code <= 0xDFFF:
                        raise LexError("unpaired surrogate in string", i - 6)
                    out.append(chr(code))
                    continue
                decoded = _SIMPLE_ESCAPES.get(esc)
                if decoded is None:
                    raise LexError(f"invalid escape \\{esc}", i)
                out.append(decoded)
                i += 2
                continue
            if ch < " ":
                raise LexError(f"control character {ch!r} in string", i)
            out.append(ch)
            i += 1

        self.pos = i + 1
        return Token(TokenKind.STRING, "".join(out), start)

    def _read_hex4(self, backslash: int) -> int:
        hexpart = self.text[backslash + 2:backslash + 6]
        if len(hexpart) < 4:
            raise LexError("short unicode escape", backslash)
        if not all(c in _HEX_DIGITS for c in hexpart):
            raise LexError(f"invalid hex escape \\u{hexpart}", backslash)
        return int(hexpart, 16)

    # -----------------------------------------------------------------------
    # NUMBERS
    # -----------------------------------------------------------------------
    def _scan_number(self) -> Token:
        """
        Greedily consume a numeric lexeme, then hold it to the strict pattern.

        The greedy pass stops at a second '.', so "1.2.3" scans as 1.2
        followed by a stray '.'.
        """
        start = self.pos
        if self.text.startswith("-", start):
            self.pos += 1
        self._consume_digits()
        if self.text.startswith(".", self.pos):
            self.pos += 1
            self._consume_digits()
        if self.pos < len(self.text) and self.text[self.pos] in "eE":
            self.pos += 1
            if self.pos < len(self.text) and self.text[self.pos] in "+-":
                self.pos += 1
            self._consume_digits()

        lexeme = self.text[start:self.pos]
        if not _NUMBER_RE.fullmatch(lexeme):
            raise LexError(f"invalid number format {lexeme!r}", start)
        return Token(TokenKind.NUMBER, _number_value(lexeme), start)

    def _consume_digits(self) -> None:
        text = self.text
        while self.pos < len(text) and text[self.pos] in _DIGITS:
            self.pos += 1

    # -----------------------------------------------------------------------
    # KEYWORDS
    # -----------------------------------------------------------------------
    def _scan_keyword(self) -> Token:
        start = self.pos
        text = self.text
        while self.pos < len(text) and text[self.pos] in _LETTERS:
            self.pos += 1
        word = text[start:self.pos]
        kind = KEYWORDS.get(word)
        if kind is None:
            raise LexError(f"unexpected keyword {word!r}", start)
        return Token(kind, offset=start)


def _number_value(lexeme: str) -> Union[int, float]:
    """
    Convert a lexeme already matched against _NUMBER_RE.

    Integers past the interpreter's int-conversion digit limit fall back to
    float (inf when out of range); float() itself has no such limit and
    overflows to inf rather than raising.
    """
    if any(c in lexeme for c in ".eE"):
        return float(lexeme)
    try:
        return int(lexeme)
    except ValueError:
        logger.debug("integer literal of %d characters kept as float", len(lexeme))
        return float(lexeme)


def tokenize(text: str) -> Iterator[Token]:
    """Yield every token of text, ending with (and including) the EOF token."""
    scanner = Scanner(text)
    while True:
        tok = scanner.next_token()
        yield tok
        if tok.kind is TokenKind.EOF:
            logger.debug("scanned %d characters", len(text))
            return
