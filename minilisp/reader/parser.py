"""
  Lisp Reader, Lexer and Parser

- Lexing pads parentheses with spaces and splits on whitespace. There are no
  strings, comments, quote shorthands or escapes.
- Parsing emits Python primitives instead of Cons cells:

    - () -> Nil
    - lists -> Python list
    - integers -> int
    - everything else -> Symbol
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from minilisp import SExpression
from minilisp.errors import LispSyntaxError
from minilisp.types.nil import Nil
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)

LPAREN = "("
RPAREN = ")"

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def tokenize(source: str) -> list[str]:
    """Split source text into parenthesis and atom tokens."""
    padded = source.replace(LPAREN, f" {LPAREN} ").replace(RPAREN, f" {RPAREN} ")
    return padded.split()


def classify(token: str) -> int | Symbol:
    """Turn an atom token into an integer literal or a symbol."""
    if INTEGER_RE.fullmatch(token):
        return int(token)
    return Symbol(token)


def parse_list(tokens: list[str]) -> tuple[SExpression, list[str]]:
    """Parse the rest of a list whose opening paren was already consumed.

    Returns the parsed value and the tokens following the closing paren.
    An immediately closed list is Nil.
    """
    if not tokens:
        raise LispSyntaxError("Unmatched '(': unexpected end of input")
    if tokens[0] == RPAREN:
        return Nil, tokens[1:]

    items: list[SExpression] = []
    while True:
        if not tokens:
            raise LispSyntaxError("Unmatched '(': unexpected end of input")
        tok, tokens = tokens[0], tokens[1:]
        if tok == RPAREN:
            return items, tokens
        if tok == LPAREN:
            nested, tokens = parse_list(tokens)
            items.append(nested)
        else:
            items.append(classify(tok))


def _read_form(tokens: list[str]) -> tuple[SExpression, list[str]]:
    if not tokens:
        raise LispSyntaxError("expected data")
    tok, rest = tokens[0], tokens[1:]
    if tok == LPAREN:
        return parse_list(rest)
    if tok == RPAREN:
        return Nil, rest
    return classify(tok), rest


def parse_root(tokens: list[str]) -> SExpression:
    """Read one top-level form; tokens after it are ignored."""
    form, _ = _read_form(tokens)
    return form


def parse(source: str) -> SExpression:
    """Parse the first form in `source`."""
    form = parse_root(tokenize(source))
    logger.debug("Parsed %r -> %r", source, form)
    return form


def parse_all(source: str) -> Iterator[SExpression]:
    """Yield every top-level form in `source`, in order."""
    tokens = tokenize(source)
    while tokens:
        form, tokens = _read_form(tokens)
        yield form
