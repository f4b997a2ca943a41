import pytest

from rpncalc import common
from rpncalc.common import InvalidSyntaxError


def test_trace_disabled_returns_function(monkeypatch):
    monkeypatch.setattr(common, 'TRACE', False)

    def f(x):
        return x

    assert common.trace(f) is f


def test_trace_depth_restored_after_error(monkeypatch, capsys):
    monkeypatch.setattr(common, 'TRACE', True)
    monkeypatch.setattr(common, 'depth', 0)

    @common.trace
    def inner(x):
        if x < 0:
            raise InvalidSyntaxError("negative")
        return x * 2

    @common.trace
    def outer(x):
        return inner(x) + 1

    for _ in range(2):
        with pytest.raises(InvalidSyntaxError):
            outer(-1)

    assert common.depth == 0
    assert outer(2) == 5
    assert common.depth == 0

    out = capsys.readouterr().out.splitlines()
    assert out[:4] == [
        "outer <- (-1,) {}",
        "  inner <- (-1,) {}",
        "  inner !! InvalidSyntax: negative",
        "outer !! InvalidSyntax: negative",
    ]
    assert out[4] == "outer <- (-1,) {}"
    assert out[-4:] == [
        "outer <- (2,) {}",
        "  inner <- (2,) {}",
        "  inner -> 4",
        "outer -> 5",
    ]
