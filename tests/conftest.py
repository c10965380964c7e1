import operator

import pytest

from shunting_yard_postfix import OPERATOR_TOKENS

BINARY = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "^": operator.pow,
}


def evaluate_rpn(tokens):
    stack = []
    for token in tokens:
        if token in OPERATOR_TOKENS:
            rhs = stack.pop()
            lhs = stack.pop()
            stack.append(BINARY[token](lhs, rhs))
        else:
            stack.append(int(token))

    if len(stack) != 1:
        raise Exception(f"Invalid RPN. Stack: {stack}")

    return stack[0]


@pytest.fixture(scope="session")
def evaluate():
    return evaluate_rpn
