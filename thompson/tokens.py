"""
Tokens produced by :func:`thompson.pattern.to_postfix` and consumed by
:func:`thompson.automatons.NFA.from_postfix`.
"""


from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Union

from .char import CONCAT as CONCAT_SYMBOL, Character


class Operator(Enum):
    """Regular operators, the value is the infix symbol"""

    STAR = "*"
    CONCAT = CONCAT_SYMBOL
    ALTERNATE = "|"

    @property
    def precedence(self) -> int:
        return _precedences[self]

    @property
    def arity(self) -> int:
        return 1 if self is Operator.STAR else 2

    def __str__(self):
        return self.value


_precedences = {
    Operator.STAR: 3,
    Operator.CONCAT: 2,
    Operator.ALTERNATE: 1,
}


@dataclass(frozen=True)
class Literal:
    """An operand, matches exactly one occurrence of ``char``"""

    char: Character

    def __str__(self):
        return self.char


Token = Union[Literal, Operator]


def to_token(char: str) -> Token:
    """Map a single postfix character to its token"""
    try:
        return Operator(char)
    except ValueError:
        return Literal(Character(char))


def tokenize(postfix: Union[str, Iterable[Token]]) -> List[Token]:
    """Tokens of a postfix stream given either as text or as tokens"""
    if isinstance(postfix, str):
        return [to_token(char) for char in postfix]
    return list(postfix)


def tokens_to_str(tokens: Iterable[Token]) -> str:
    return "".join(map(str, tokens))


OPERATORS = frozenset(op.value for op in Operator)
