from .containers import Queue, Stack
from .postfix import (
    FormatError,
    InvalidOperatorCount,
    InvalidToken,
    MismatchedParenthesis,
    MissingOpenParenthesis,
    Postfix,
    Step,
    UnmatchedOpenParenthesis,
    parse,
    to_postfix,
)
from .tokens import OPERATOR_TOKENS, Associativity, OperatorSpec
from .trace import print_trace, trace
