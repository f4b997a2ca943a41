from contextlib import contextmanager
import sys

from .common import EvalError, SourceUnavailableError


class LineResult:
    def __init__(self, lineno, line, value=None, error=None):
        self.lineno = lineno
        self.line = line
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        if self.ok:
            return f"LineResult({self.lineno}, {self.line!r}, value={self.value})"
        return f"LineResult({self.lineno}, {self.line!r}, error={self.error.kind})"


@contextmanager
def open_source(path=None):
    """Yield the lines of `path`, or of standard input when `path` is None.

    Files are read as UTF-8, stdin in its own encoding. Undecodable bytes
    become U+FFFD and end up as invalid tokens of the line they appear on.
    """
    if path is None:
        if hasattr(sys.stdin, 'reconfigure'):
            sys.stdin.reconfigure(errors='replace')
        yield sys.stdin
        return

    try:
        f = open(path, encoding='utf-8', errors='replace')
    except OSError as e:
        raise SourceUnavailableError(path, e.strerror or str(e)) from e

    with f:
        yield f


def run(lines, evaluator, keep_going=False, before=None):
    """Evaluate each line in turn and yield a LineResult per line.

    `before(lineno, line)`, when given, is called ahead of each evaluation.
    Stops after the first failing line unless `keep_going` is set.
    """
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip('\r\n')
        if before is not None:
            before(lineno, line)
        try:
            value = evaluator.evaluate(line)
        except EvalError as e:
            yield LineResult(lineno, line, error=e)
            if not keep_going:
                return
            continue

        yield LineResult(lineno, line, value=value)
