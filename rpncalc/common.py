from functools import wraps
import os

TRACE = os.environ.get('RPNCALC_TRACE', '') == '1'

depth = 0


def trace(f):
    """Print calls into and out of `f`, indented by nesting depth.

    Only active when RPNCALC_TRACE=1 at import time; otherwise `f` is
    returned untouched. A call that raises is shown with `!!` and the
    exception kind.
    """
    if not TRACE:
        return f

    @wraps(f)
    def wrapper(*args, **kwargs):
        global depth

        indent = '  ' * depth
        print(f"{indent}{f.__name__} <- {args} {kwargs}")
        depth += 1
        try:
            ret = f(*args, **kwargs)
        except RpnError as e:
            print(f"{indent}{f.__name__} !! {e.kind}: {e}")
            raise
        finally:
            depth -= 1

        print(f"{indent}{f.__name__} -> {ret}")
        return ret

    return wrapper


class RpnError(Exception):
    kind = 'RpnError'


class EvalError(RpnError):
    kind = 'EvalError'

    def __init__(self, message, token=None, position=None):
        super().__init__(message)
        self.token = token
        self.position = position


class InvalidTokenError(EvalError):
    kind = 'InvalidToken'


class InsufficientOperandsError(EvalError):
    kind = 'InsufficientOperands'


class NumericError(EvalError):
    kind = 'ArithmeticError'


class InvalidSyntaxError(EvalError):
    kind = 'InvalidSyntax'


class SourceUnavailableError(RpnError):
    kind = 'SourceUnavailable'

    def __init__(self, path, reason):
        super().__init__(f"cannot open {path}: {reason}")
        self.path = path
        self.reason = reason
