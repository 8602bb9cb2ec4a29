# json_validator.py
# Strict JSON syntax validator: recursive-descent grammar check over the
# token stream produced by lexer.Scanner.
#
# =============================================================================
#  VALIDATOR: RECURSIVE DESCENT OVER A PULLED TOKEN STREAM
# =============================================================================
#
# The JSON grammar is LL(1) over the scanner's token alphabet: every rule
# picks its alternative from the kind of the single lookahead token, so
# there is no backtracking and no token buffer beyond that one slot
# [geeksforgeeks.org, Recursive Descent Parser].
#
# Grammar accepted:
#   document := (object | array) EOF
#   value    := STRING | NUMBER | TRUE | FALSE | NULL | object | array
#   object   := '{' '}' | '{' member (',' member)* '}'
#   member   := STRING ':' value
#   array    := '[' ']' | '[' value (',' value)* ']'
#
# Bare scalars at the root are rejected [RFC 4627, sec. 2]. Duplicate keys
# are accepted. Nesting is capped by an explicit depth counter, default 256
# (JSON_checker itself uses 19, see JSON_CHECKER_DEPTH).
#
# Every rejection is a JSONSyntaxError raised where it is detected and
# caught once, in validate().
#
# =============================================================================
#  REFERENCES
# =============================================================================
# [1] geeksforgeeks.org - Recursive Descent Parser
# [2] RFC 4627 / RFC 8259 - The JavaScript Object Notation (JSON)
# [3] json.org/JSON_checker - test suite
# =============================================================================

import argparse
import logging
import sys
from typing import List, Optional

from lexer import Scanner, tokenize
from tokens import (
    SCALAR_KINDS,
    JSONSyntaxError,
    LexError,
    NestingTooDeep,
    ParseError,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
DEPTH_LIMIT_DEFAULT = 256        # Stays well inside the default interpreter recursion limit
JSON_CHECKER_DEPTH  = 19         # JSON_checker suite: 19 levels pass, 20 fail
DEFAULT_DOCUMENT    = "{}"

# ---------------------------------------------------------------------------
# LOOKAHEAD CURSOR
# ---------------------------------------------------------------------------
class TokenCursor:
    """
    Exactly one buffered token over a Scanner.

    peek() observes the next unconsumed token; advance() hands it over and
    refills the slot from the scanner.
    """

    def __init__(self, scanner: Scanner):
        self._scanner = scanner
        self._current = scanner.next_token()

    def peek(self) -> Token:
        return self._current

    def advance(self) -> Token:
        consumed = self._current
        self._current = self._scanner.next_token()
        return consumed

# ---------------------------------------------------------------------------
# PARSER
# ---------------------------------------------------------------------------
class Parser:
    """Grammar rules, one method per production."""

    def __init__(self, text: str, max_depth: int = DEPTH_LIMIT_DEFAULT):
        self.cursor = TokenCursor(Scanner(text))
        self.max_depth = max_depth
        self.depth = 0

    def expect(self, kind: TokenKind) -> Token:
        """
        Consume the lookahead if it is of the expected kind.

        This is the only place structural tokens are consumed.
        """
        tok = self.cursor.peek()
        if tok.kind is not kind:
            raise ParseError(f"expected {kind}, got {tok.describe()}", tok.offset)
        return self.cursor.advance()

    def parse_document(self) -> None:
        tok = self.cursor.peek()
        if tok.kind not in (TokenKind.LEFT_BRACE, TokenKind.LEFT_BRACKET):
            raise ParseError(
                f"payload must be object or array at root - got {tok.describe()}",
                tok.offset,
            )
        self.parse_value()
        # Trailing content after the root value fails here.
        self.expect(TokenKind.EOF)

    def parse_value(self) -> None:
        tok = self.cursor.peek()
        if tok.kind in SCALAR_KINDS:
            self.cursor.advance()
        elif tok.kind is TokenKind.LEFT_BRACE:
            self.parse_object()
        elif tok.kind is TokenKind.LEFT_BRACKET:
            self.parse_array()
        else:
            raise ParseError(f"unexpected value type {tok.kind}", tok.offset)

    def parse_object(self) -> None:
        self._enter(self.expect(TokenKind.LEFT_BRACE))
        if self.cursor.peek().kind is TokenKind.RIGHT_BRACE:
            self.expect(TokenKind.RIGHT_BRACE)
            self.depth -= 1
            return

        while True:
            self.parse_member()
            if self.cursor.peek().kind is TokenKind.RIGHT_BRACE:
                break
            # A '}' right after this ',' fails in parse_member's STRING check.
            self.expect(TokenKind.COMMA)
        self.expect(TokenKind.RIGHT_BRACE)
        self.depth -= 1

    def parse_member(self) -> None:
        self.expect(TokenKind.STRING)
        self.expect(TokenKind.COLON)
        self.parse_value()

    def parse_array(self) -> None:
        self._enter(self.expect(TokenKind.LEFT_BRACKET))
        if self.cursor.peek().kind is TokenKind.RIGHT_BRACKET:
            self.expect(TokenKind.RIGHT_BRACKET)
            self.depth -= 1
            return

        while True:
            self.parse_value()
            if self.cursor.peek().kind is TokenKind.RIGHT_BRACKET:
                break
            self.expect(TokenKind.COMMA)
        self.expect(TokenKind.RIGHT_BRACKET)
        self.depth -= 1

    def _enter(self, opener: Token) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingTooDeep(f"nesting deeper than {self.max_depth} levels", opener.offset)

# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def check(text: str, *, max_depth: int = DEPTH_LIMIT_DEFAULT) -> None:
    """
    Raise the first JSONSyntaxError found in text; return None if it is valid.
    """
    Parser(text, max_depth).parse_document()


def validate(text: str, *, max_depth: int = DEPTH_LIMIT_DEFAULT) -> bool:
    """
    Return True if text is a well-formed JSON document, False otherwise.

    Never raises for malformed input. The rejection reason is logged at
    DEBUG level on this module's logger.
    """
    try:
        check(text, max_depth=max_depth)
    except JSONSyntaxError as exc:
        logger.debug("invalid JSON: %s", exc)
        return False
    except RecursionError:
        # Only reachable when max_depth is set above the interpreter's stack.
        logger.debug("invalid JSON: nesting exceeds the recursion limit")
        return False
    return True

# ---------------------------------------------------------------------------
# CLI ENTRYPOINT
# ---------------------------------------------------------------------------
def _read_document(args) -> str:
    if args.file is None:
        return args.document
    with open(args.file, "r", encoding="utf-8") as fh:
        return fh.read()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command-line validator.

    Exit codes: 0 valid, 1 invalid, 2 when the document cannot be read or
    something unexpected goes wrong.
    """
    ap = argparse.ArgumentParser(prog="json-validate", description="Strict JSON syntax validator")
    ap.add_argument("document", nargs="?", default=DEFAULT_DOCUMENT,
                    help="JSON text to check (default: %(default)s)")
    ap.add_argument("-f", "--file", help="read the document from a file instead")
    ap.add_argument("--max-depth", type=int, default=DEPTH_LIMIT_DEFAULT)
    ap.add_argument("--debug", action="store_true", help="dump token stream and exit")
    ap.add_argument("-v", "--verbose", action="store_true", help="log the rejection reason")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        data = _read_document(args)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("cannot read %s: %s", args.file, exc)
        return 2

    if args.debug:
        try:
            for tok in tokenize(data):
                print(f"{tok.offset}\t{tok.describe()}")
        except LexError as exc:
            print(f"SyntaxError: {exc}", file=sys.stderr)
            return 1
        return 0

    try:
        ok = validate(data, max_depth=args.max_depth)
    except Exception:
        logger.exception("unexpected error while validating")
        return 2

    print("Valid JSON" if ok else "Invalid JSON")
    return 0 if ok else 1

# ---------------------------------------------------------------------------
# MAIN GUARD
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
