from .common import NumericError


class IntModel:
    """Signed two's complement integer of a fixed bit width."""

    def __init__(self, width=32):
        if width < 2:
            raise ValueError(f"width must be at least 2 bits, got {width}")
        self.width = width
        self.min = -(1 << (width - 1))
        self.max = (1 << (width - 1)) - 1

    def fits(self, value):
        return self.min <= value <= self.max

    def check(self, value, op):
        if not self.fits(value):
            raise NumericError(f"overflow in '{op}' (i{self.width})")
        return value

    def __repr__(self):
        return f"IntModel({self.width})"


INT32 = IntModel(32)
INT64 = IntModel(64)


def _trunc_div(x, y):
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def _div(x, y):
    if y == 0:
        raise NumericError("division by zero")
    return _trunc_div(x, y)


def _rem(x, y, model):
    if y == 0:
        raise NumericError("remainder by zero")
    # the quotient has to be representable too, so MIN % -1 overflows
    q = model.check(_trunc_div(x, y), '%')
    return x - y * q


OPERATORS = {
    '+': lambda x, y, model: x + y,
    '-': lambda x, y, model: x - y,
    '*': lambda x, y, model: x * y,
    '/': lambda x, y, model: _div(x, y),
    '%': _rem,
}


def apply(op, x, y, model=INT32):
    """Apply the binary operator `op` to `x` and `y`, `x` being the left operand.

    Arithmetic is exact; a result that does not fit `model` is an overflow.
    """
    return model.check(OPERATORS[op](x, y, model), op)
