""" CSS VALUE LEXING

Splits one property value, e.g. the right hand side of
`background: url(a.png) no-repeat, linear-gradient(red, blue)`, into tokens.

<value>
    <number/>   1px, -2, .5em, 10%
    <color/>    rgb(...), rgba(...)
    <gradient/> linear-gradient(...)
    <calc/>     calc(...)
    <url/>      url(...)
    <variable/> var(...)
    <ident/>    auto, no-repeat, --custom
    <string/>   'a', "b"
    <comma/>    ,
    <operator/> /
</value>

Recognizers are plain functions of `(source, pos)` returning the token and the
position after it, or `None` when the text at `pos` isn't theirs. The lexer tries
them in `RECOGNIZERS` order; the first match wins.
"""

from __future__ import annotations
import logging
import math
import re
from collections.abc import Callable
from typing import Optional
from cssvalue.tokens import *
from cssvalue.tokens import Function

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 10

# ECMAScript WhiteSpace and LineTerminator code points; Python's `\s` and
# `str.strip()` disagree with it on U+FEFF and U+001C..U+001F
WHITESPACE_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(cp) for cp in range(0x2000, 0x200b))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WS = re.escape(WHITESPACE_CHARS)

WHITESPACE = re.compile(f"[{_WS}]+")
COMMA = re.compile(r", *")
OPERATOR = re.compile(r"/ *")
IDENT = re.compile(r"([A-Za-z0-9_-]+) *")
# The sign is only allowed in front of integer digits: `-.5` is not a float
FLOAT = re.compile(f"(((?:[-+]?[0-9]+)?\\.[0-9]+)([^{_WS}/]+)?) *")
INTEGER = re.compile(f"(([-+]?[0-9]+)([^{_WS}/]+)?) *")
SINGLE = re.compile(r"'([^']*)' *")
DOUBLE = re.compile(r'"([^"]*)" *')
COLOR = re.compile(r"(rgba?\([^)]*\)) *")
URL = re.compile(r"(url\([^)]*\)) *")

Match = tuple[Token, int]
Recognizer = Callable[[str, int], Optional[Match]]

class ParseError(Exception):
    def __init__(self, message: str, *, snippet: str = '', position: int = 0):
        self.snippet = snippet
        self.position = position
        super().__init__(message)

class MalformedInputError(ParseError): pass

def read_to_matching_paren(source: str, start: int = 0) -> str:
    """Read from the `(` at `start` through the `)` that closes it, nested pairs included.

    Raises:
        MalformedInputError: If there is no `(` at `start` or it is never closed.
    """
    if source[start:start + 1] != "(":
        raise MalformedInputError("expected opening paren", position=start)

    depth = 0
    for index in range(start, len(source)):
        if source[index] == "(":
            depth += 1
        elif source[index] == ")":
            depth -= 1

        if depth == 0:
            return source[start:index + 1]

    raise MalformedInputError("Failed parsing: No matching paren", position=start)

def to_int32(digits: str) -> int:
    """Convert to a signed 32-bit integer the way `~~Number(digits)` does in JavaScript.

    The digits go through a double first, so very long inputs lose precision
    before being truncated toward zero and wrapped into [-2**31, 2**31). Inputs
    too large for a double become 0.
    """
    number = float(digits)
    if not math.isfinite(number):
        return 0
    wrapped = int(number) % 2**32
    return wrapped - 2**32 if wrapped >= 2**31 else wrapped

def operator(source: str, pos: int) -> Match | None:
    if (m := OPERATOR.match(source, pos)) is None:
        return None
    return Operator(m.group(0)), m.end()

def comma(source: str, pos: int) -> Match | None:
    if (m := COMMA.match(source, pos)) is None:
        return None
    return Comma(m.group(0)), m.end()

def ident(source: str, pos: int) -> Match | None:
    if (m := IDENT.match(source, pos)) is None:
        return None
    return Ident(m.group(1), m.group(0)), m.end()

def float_number(source: str, pos: int) -> Match | None:
    if (m := FLOAT.match(source, pos)) is None:
        return None
    return Number(float(m.group(2)), m.group(3) or '', m.group(1), m.group(0)), m.end()

def integer(source: str, pos: int) -> Match | None:
    if (m := INTEGER.match(source, pos)) is None:
        return None
    return Number(to_int32(m.group(2)), m.group(3) or '', m.group(1), m.group(0)), m.end()

def number(source: str, pos: int) -> Match | None:
    return first_match((float_number, integer), source, pos)

def single(source: str, pos: int) -> Match | None:
    if (m := SINGLE.match(source, pos)) is None:
        return None
    return String(m.group(1), "'", m.group(0)), m.end()

def double(source: str, pos: int) -> Match | None:
    if (m := DOUBLE.match(source, pos)) is None:
        return None
    return String(m.group(1), '"', m.group(0)), m.end()

def string(source: str, pos: int) -> Match | None:
    return first_match((single, double), source, pos)

def color(source: str, pos: int) -> Match | None:
    if (m := COLOR.match(source, pos)) is None:
        return None
    return Color(m.group(1), m.group(0)), m.end()

def url(source: str, pos: int) -> Match | None:
    if (m := URL.match(source, pos)) is None:
        return None
    return Url(m.group(1), m.group(0)), m.end()

def nested(keyword: str, kind: type[Function]) -> Recognizer:
    """Build a recognizer for `keyword(...)` where the arguments may hold more calls.

    Only the keyword decides whether the recognizer applies; whatever follows it
    must be a balanced paren group, otherwise `MalformedInputError` is raised.
    Trailing spaces are left for the lexer to skip.
    """
    def recognize(source: str, pos: int) -> Match | None:
        if not source.startswith(keyword, pos):
            return None
        arguments = read_to_matching_paren(source, pos + len(keyword))
        end = pos + len(keyword) + len(arguments)
        return kind(keyword + arguments, source[pos:end]), end

    recognize.__name__ = recognize.__qualname__ = kind.type
    return recognize

gradient = nested("linear-gradient", Gradient)
calc = nested("calc", Calc)
variable = nested("var", Variable)

# Keyword functions are lexically identifiers, so they must be tried before `ident`
RECOGNIZERS: tuple[Recognizer, ...] = (
    operator,
    number,
    color,
    gradient,
    calc,
    url,
    variable,
    ident,
    string,
    comma,
)

def first_match(recognizers: tuple[Recognizer, ...], source: str, pos: int) -> Match | None:
    """Try each recognizer in turn and return the first match, if any."""
    for recognize in recognizers:
        if (match := recognize(source, pos)) is not None:
            return match
    return None

class Lexer:
    def __init__(self, source: str) -> None:
        self.source = source
        self.index = 0

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        # Whitespace nothing consumed is dropped at the end of the source
        if self.index >= len(self.source) or WHITESPACE.fullmatch(self.source, self.index):
            self.index = len(self.source)
            raise StopIteration

        token = self.value()
        if token is None:
            snippet = self.source[self.index:self.index + SNIPPET_LENGTH]
            logger.debug("no token matches at %d: %r", self.index, snippet)
            raise ParseError(
                f"failed to parse near '{snippet}...'",
                snippet=snippet,
                position=self.index,
            )
        return token

    def process(self) -> list[Token]:
        """Tokenize the rest of the source at once."""
        return [token for token in self]

    def value(self) -> Token | None:
        """Skip whitespace and consume the next token.

        Returns:
            The token, or `None` if no recognizer matches. In that case only the
            whitespace has been consumed.
        """
        start = self.index
        if (m := WHITESPACE.match(self.source, self.index)) is not None:
            self.index = m.end()

        match = first_match(RECOGNIZERS, self.source, self.index)
        if match is None:
            return None

        token, self.index = match
        token.raw = self.source[start:self.index]
        return token

def parse(source: str) -> list[Token]:
    """Tokenize a CSS property value.

    Leading and trailing whitespace is ignored.

    Raises:
        ParseError: If part of the value isn't recognized.
        MalformedInputError: If a `calc`, `var` or `linear-gradient` is not
            followed by a balanced paren group.
    """
    tokens = Lexer(source.strip(WHITESPACE_CHARS)).process()
    logger.debug("parsed %d tokens from %r", len(tokens), source)
    return tokens
