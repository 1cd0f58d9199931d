from itertools import tee, zip_longest
from typing import Iterable, List, Optional, Sequence, Union
from .char import ALPHANUMERIC, CONCAT, Character
from .tokens import OPERATORS, Literal, Operator, Token, tokens_to_str


class CompileError(Exception):
    """A pattern or postfix stream that cannot be turned into an automaton"""

    def __init__(self, message: str, postfix: Union[str, Sequence[Token]] = "",
                 index: Optional[int] = None):
        self.postfix = postfix if isinstance(postfix, str) else tokens_to_str(postfix)
        self.index = index
        if index is not None:
            substr = self.postfix[max(index-3, 0):min(index+3, len(self.postfix))]
            message = "{}. At index {}: {}".format(message, index, substr)
        super().__init__(message)


class EmptyPatternError(CompileError):
    def __init__(self, postfix=""):
        super().__init__("Empty pattern", postfix)


class OperandUnderflowError(CompileError):
    """An operator has fewer operands than its arity"""

    def __init__(self, operator: Operator, postfix, index):
        self.operator = operator
        super().__init__(
            "Operator {} requires {} operand(s)".format(operator, operator.arity),
            postfix, index)


class OperandOverflowError(CompileError):
    """Some operands are not joined by any operator"""

    def __init__(self, count: int, postfix):
        self.count = count
        super().__init__(
            "{} dangling fragments, expected a single one".format(count),
            postfix, len(postfix) - 1)


class MalformedAlphabetError(CompileError):
    """A symbol that is not part of the accepted alphabet"""

    def __init__(self, symbol, pattern, index):
        self.symbol = symbol
        super().__init__("Unexpected symbol {!r}".format(symbol), pattern, index)


def insert_concat(pattern: str) -> str:
    """
    Make concatenations explicit: insert :data:`~thompson.char.CONCAT`
    between two consecutive characters when the first ends an operand
    (alphanumeric, ``*`` or ``)``) and the second starts one
    (alphanumeric or ``(``).

    >>> insert_concat("(a|b)*abb")
    '(a|b)*.a.b.b'
    """
    p1, p2 = tee(pattern)
    next(p2, None)

    normalized = []
    for char, next_char in zip_longest(p1, p2):
        normalized.append(char)
        if next_char is None:
            break
        if ((char in ALPHANUMERIC or char in "*)")
                and (next_char in ALPHANUMERIC or next_char == "(")):
            normalized.append(CONCAT)
    return "".join(normalized)


def to_postfix(pattern: str) -> List[Token]:
    """
    Translate a concatenation-explicit infix pattern to postfix tokens
    using the shunting-yard algorithm.

    Operators, from the highest precedence to the lowest, are:

    * ``*``, kleene star, unary and postfix.
    * ``.``, concatenation.
    * ``|``, union.

    Operators of equal precedence are left associative. Any character
    that is not an operator nor a parenthesis is an operand.

    The translation does not validate the pattern: an unmatched ``)``
    empties the stack and an unmatched ``(`` is given back as an
    operand, the compiler rejects whatever is left malformed.
    """
    output = []
    stack = []

    for char in pattern:
        if char in ALPHANUMERIC:
            output.append(Literal(Character(char)))

        elif char == "(":
            stack.append(char)

        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()

        elif char in OPERATORS:
            operator = Operator(char)
            while (stack and stack[-1] != "("
                   and stack[-1].precedence >= operator.precedence):
                output.append(stack.pop())
            stack.append(operator)

        else:
            output.append(Literal(Character(char)))

    while stack:
        top = stack.pop()
        output.append(Literal(Character(top)) if top == "(" else top)

    return output


def parse(pattern: str) -> List[Token]:
    """Normalize then translate a pattern to postfix tokens"""
    return to_postfix(insert_concat(pattern))


def check_alphabet(pattern: str, alphabet: Iterable[str]) -> None:
    """Ensure every operand of ``pattern`` belongs to ``alphabet``"""
    allowed = set(alphabet) | OPERATORS | {"(", ")"}
    for index, char in enumerate(pattern):
        if char not in allowed:
            raise MalformedAlphabetError(char, pattern, index)
