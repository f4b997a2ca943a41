from .common import (
    InvalidTokenError,
    InsufficientOperandsError,
    InvalidSyntaxError,
    NumericError,
    trace,
)
from .lexer import tokenize
from .ops import IntModel, apply


class Evaluator:
    """Evaluates one RPN expression per call.

    The evaluator only carries its settings; every call works on a fresh
    stack, so the same instance can be reused for any number of lines.
    When `verbose` is set, the remaining tokens and the stack are passed to
    `trace` after each token.
    """

    __slots__ = ('_verbose', '_model', '_trace')

    def __init__(self, verbose=False, width=32, trace=print):
        object.__setattr__(self, '_verbose', bool(verbose))
        object.__setattr__(self, '_model', IntModel(width))
        object.__setattr__(self, '_trace', trace)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def verbose(self):
        return self._verbose

    @property
    def width(self):
        return self._model.width

    @property
    def model(self):
        return self._model

    def tokenize(self, line):
        return tokenize(line, self._model)

    @trace
    def evaluate(self, line):
        tokens = self.tokenize(line)
        stack = []

        for i, token in enumerate(tokens):
            if token.type == 'number':
                stack.append(token.value)

            elif token.type == 'invalid':
                raise InvalidTokenError(f"invalid token: {token.text}", token.text, i)

            else:
                if len(stack) < 2:
                    raise InsufficientOperandsError(
                        f"'{token.type}' needs two operands, found {len(stack)}", token.text, i)

                y = stack.pop()
                x = stack.pop()
                try:
                    stack.append(apply(token.type, x, y, self._model))
                except NumericError as e:
                    e.token = token.text
                    e.position = i
                    raise

            if self._verbose:
                self._trace(f"{[t.text for t in tokens[i + 1:]]} {stack}")

        if len(stack) != 1:
            if stack:
                raise InvalidSyntaxError(f"{len(stack)} values left on the stack: {stack}")
            raise InvalidSyntaxError("empty expression")

        return stack[0]

    def __repr__(self):
        return f"Evaluator(verbose={self._verbose}, width={self.width})"


def evaluate(line, verbose=False, width=32, trace=print):
    return Evaluator(verbose, width, trace).evaluate(line)
