"""Tokenizing of single CSS property values.

    >>> from cssvalue import parse
    >>> [token.record() for token in parse("16px/1.5 'Helvetica'")]
    [{'type': 'number', 'string': '16px', 'unit': 'px', 'value': 16}, {'type': 'operator', 'value': '/'}, {'type': 'number', 'string': '1.5', 'unit': '', 'value': 1.5}, {'type': 'string', 'quote': "'", 'string': "'Helvetica'", 'value': 'Helvetica'}]
"""
from cssvalue.lexer import Lexer, MalformedInputError, ParseError, parse, read_to_matching_paren
from cssvalue.tokens import *

__version__ = "0.1.0"
