"""Boolean search queries of words joined by AND and OR."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple, Union


class QueryError(ValueError):
    """Raised for a query that cannot be parsed."""


class Connective(Enum):
    """How the two sides of a query node are joined."""

    OR = "OR"
    AND = "AND"


@dataclass
class QueryNode:
    """Two operands joined by a connective."""

    connective: Connective
    left: "Operand"
    right: "Operand"


Operand = Union[str, QueryNode]

_OPEN = "open"
_CLOSE = "close"
_WORD = "word"
_OPERATOR = "operator"

_Lexeme = Tuple[str, Optional[Union[str, Connective]]]


@dataclass
class Query:
    """A parsed query; the root is a single word or a node."""

    root: Operand

    def _iter_words(self, operand: Operand) -> Iterator[str]:
        if isinstance(operand, str):
            yield operand
        else:
            yield from self._iter_words(operand.left)
            yield from self._iter_words(operand.right)

    def words(self) -> List[str]:
        """Distinct words of the query in the order they appear."""
        return list(dict.fromkeys(self._iter_words(self.root)))


def _lex(tokens: Sequence[str]) -> List[_Lexeme]:
    lexemes: List[_Lexeme] = []
    for token in tokens:
        if token in (Connective.AND.value, Connective.OR.value):
            lexemes.append((_OPERATOR, Connective(token)))
            continue
        core = token.lstrip("(")
        word = core.rstrip(")")
        lexemes.extend([(_OPEN, None)] * (len(token) - len(core)))
        if word in (Connective.AND.value, Connective.OR.value):
            lexemes.append((_OPERATOR, Connective(word)))
        elif word:
            lexemes.append((_WORD, word))
        lexemes.extend([(_CLOSE, None)] * (len(core) - len(word)))
    return lexemes


class _Parser:
    """Left-to-right parser: operators have equal precedence and group leftwards."""

    def __init__(self, lexemes: List[_Lexeme]) -> None:
        self._lexemes = lexemes
        self._pos = 0

    def _peek(self) -> Optional[_Lexeme]:
        if self._pos < len(self._lexemes):
            return self._lexemes[self._pos]
        return None

    def _take(self) -> _Lexeme:
        lexeme = self._peek()
        if lexeme is None:
            raise QueryError("bad request: query ends where a word is expected")
        self._pos += 1
        return lexeme

    def parse(self) -> Operand:
        if not self._lexemes:
            raise QueryError("bad request: empty query")
        root = self._expression()
        leftover = self._peek()
        if leftover is not None:
            if leftover[0] == _CLOSE:
                raise QueryError("bad request: unbalanced parenthesis")
            raise QueryError("bad request: missing operator between words")
        return root

    def _expression(self) -> Operand:
        result = self._operand()
        while True:
            lexeme = self._peek()
            if lexeme is None or lexeme[0] != _OPERATOR:
                return result
            self._pos += 1
            connective = lexeme[1]
            assert isinstance(connective, Connective)
            result = QueryNode(connective, result, self._operand())

    def _operand(self) -> Operand:
        kind, value = self._take()
        if kind == _WORD:
            assert isinstance(value, str)
            return value
        if kind == _OPEN:
            inner = self._expression()
            closing = self._peek()
            if closing is None or closing[0] != _CLOSE:
                raise QueryError("bad request: unbalanced parenthesis")
            self._pos += 1
            return inner
        if kind == _OPERATOR:
            raise QueryError("bad request: operator where a word is expected")
        raise QueryError("bad request: unbalanced parenthesis")


def parse_query(tokens: Sequence[str]) -> Query:
    """Parse tokens such as ``["(a", "AND", "b)", "OR", "c"]`` into a query.

    Parentheses are attached to the words they enclose. AND and OR bind
    equally and group from the left. Raises QueryError on a malformed query.
    """
    return Query(_Parser(_lex(tokens)).parse())