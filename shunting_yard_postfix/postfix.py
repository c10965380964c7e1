import logging

from .containers import Queue, Stack
from .tokens import (
    CLOSE_PARENTHESIS,
    DIGITS,
    NUMBER_DELIMITERS,
    OPEN_PARENTHESIS,
    OPERATOR_TOKENS,
    WHITESPACE,
)

logger = logging.getLogger(__name__)

###########
# Library #
###########

# Shunting yard algorithm over a fixed operator set
# Numbers go straight to the output queue, operators wait on the stack
# until something of lower precedence (or a closing parenthesis) flushes them


class FormatError(Exception):
    def __init__(self, err, start, end):
        super().__init__(err, start, end)
        self.err = err
        self.start = start
        self.end = end

    def __str__(self):
        return f"@[{self.start}, {self.end}]: {self.err}"


class InvalidToken(FormatError):
    pass


class InvalidOperatorCount(FormatError):
    pass


class UnmatchedOpenParenthesis(FormatError):
    pass


class MismatchedParenthesis(FormatError):
    pass


class MissingOpenParenthesis(FormatError):
    pass


class Step:
    """
    Snapshot handed to an observer after a token is consumed
    """

    __slots__ = ("position", "token", "action", "output", "stack")

    def __init__(self, position, token, action, output, stack):
        self.position = position
        self.token = token
        self.action = action
        self.output = output
        self.stack = stack

    def __repr__(self):
        return f"<Step {self.action} {self.token.__repr__()} @{self.position} output={self.output} stack={self.stack}>"


class Postfix:
    """
    Converts one infix string to postfix. Instances are single use
    """

    def __init__(self, text: str, observer=None):
        self.text = text
        self.text_length = len(text)
        self.pos = 0

        self.output_queue = Queue(self.text_length)
        self.operator_stack = Stack(self.text_length)

        # Used for the final sanity check only
        self.operator_count = 0
        self.number_count = 0

        self.observer = observer
        self._parsed = False

    def parse(self) -> Queue:
        if self._parsed:
            raise RuntimeError("Postfix.parse() can only be called once per instance")
        self._parsed = True

        while self.pos < self.text_length:
            token = self.current_token()

            if token == WHITESPACE:
                self.consume_token(WHITESPACE)
            elif token in DIGITS:
                start = self.pos
                number = self.parse_number()
                self.output_queue.enqueue(number)
                self.emit(start, number, "number")
            elif token in OPERATOR_TOKENS:
                self.operator_count += 1
                self.parse_operator()
            elif token == OPEN_PARENTHESIS:
                self.operator_stack.push(OPEN_PARENTHESIS)
                self.consume_token()
                self.emit(self.pos - 1, token, "open")
            elif token == CLOSE_PARENTHESIS:
                self.parse_right_parenthesis()
            else:
                raise InvalidToken(
                    f"Invalid token {token.__repr__()}", self.pos, self.pos + 1
                )

        if self.operator_count >= self.number_count:
            raise InvalidOperatorCount(
                f"Invalid operator count: {self.operator_count}, number count: {self.number_count}",
                0,
                self.text_length,
            )

        while self.operator_stack.size() > 0:
            operator = self.operator_stack.pop()
            if operator == OPEN_PARENTHESIS:
                raise UnmatchedOpenParenthesis(
                    "Unmatched open parenthesis", self.text_length, self.text_length
                )
            self.output_queue.enqueue(operator)
            self.emit(self.text_length, operator, "drain")

        return self.output_queue

    def parse_number(self) -> str:
        self.number_count += 1
        start = self.pos

        while (
            self.pos < self.text_length
            and self.current_token() not in NUMBER_DELIMITERS
        ):
            self.consume_token()

        return self.text[start : self.pos]

    def parse_operator(self):
        o1 = self.current_token()
        self.consume_token()
        spec1 = OPERATOR_TOKENS[o1]

        while self.operator_stack.size() > 0:
            o2 = self.operator_stack.peek()

            # Parentheses scope the flush
            if o2 == OPEN_PARENTHESIS:
                break

            spec2 = OPERATOR_TOKENS[o2]
            if spec2.precedence > spec1.precedence or (
                spec2.precedence == spec1.precedence and spec1.is_left_associative
            ):
                self.output_queue.enqueue(self.operator_stack.pop())
            else:
                break

        self.operator_stack.push(o1)
        self.emit(self.pos - 1, o1, "operator")

    def parse_right_parenthesis(self):
        start = self.pos
        self.consume_token(CLOSE_PARENTHESIS)

        while self.operator_stack.peek() != OPEN_PARENTHESIS:
            if self.operator_stack.size() == 0:
                raise MismatchedParenthesis("Mismatched parenthesis", start, self.pos)
            self.output_queue.enqueue(self.operator_stack.pop())

        if self.operator_stack.peek() != OPEN_PARENTHESIS:
            raise MissingOpenParenthesis("No left parenthesis found", start, self.pos)

        # Pop the open parenthesis
        self.operator_stack.pop()
        self.emit(start, CLOSE_PARENTHESIS, "close")

    def consume_token(self, token=None):
        if token is not None and self.current_token() != token:
            raise InvalidToken(
                f"Expected {token.__repr__()}, got {self.current_token().__repr__()}",
                self.pos,
                self.pos + 1,
            )
        self.pos += 1

    def current_token(self) -> str:
        return self.text[self.pos]

    def emit(self, position, token, action):
        output = self.output_queue.to_list()
        stack = self.operator_stack.to_list()

        logger.debug(
            "on token %r (%s): output=%s stack=%s", token, action, output, stack
        )

        if self.observer is not None:
            self.observer(Step(position, token, action, output, stack))


def parse(text: str) -> Queue:
    """
    Convert `text` to a postfix token queue

    Raises a FormatError subclass on malformed input
    """
    return Postfix(text).parse()


def to_postfix(text: str) -> list:
    return list(parse(text))
