from enum import Enum

from .frozen import FrozenDict


class Associativity(Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class OperatorSpec:
    """
    Precedence and associativity of a binary operator
    Higher precedence binds tighter
    """

    __slots__ = ("precedence", "associativity")

    def __init__(self, precedence: int, associativity=Associativity.LEFT):
        if precedence < 0:
            raise ValueError(f"precedence must be >= 0, got {precedence}")
        self.precedence = precedence
        self.associativity = associativity

    @property
    def is_left_associative(self):
        return self.associativity == Associativity.LEFT

    def __eq__(self, other):
        if not isinstance(other, OperatorSpec):
            return NotImplemented
        return (self.precedence, self.associativity) == (
            other.precedence,
            other.associativity,
        )

    def __hash__(self):
        return hash((self.precedence, self.associativity))

    def __repr__(self):
        return f"<OperatorSpec precedence={self.precedence} associativity={self.associativity.value}>"


OPERATOR_TOKENS = FrozenDict(
    {
        "^": OperatorSpec(4, Associativity.RIGHT),
        "*": OperatorSpec(3),
        "/": OperatorSpec(3),
        "+": OperatorSpec(2),
        "-": OperatorSpec(2),
    }
)

DIGITS = frozenset("0123456789")
WHITESPACE = " "
OPEN_PARENTHESIS = "("
CLOSE_PARENTHESIS = ")"

# A number runs until one of these (or the end of the input)
NUMBER_DELIMITERS = frozenset((WHITESPACE, CLOSE_PARENTHESIS))
