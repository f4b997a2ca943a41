from rpncalc.lexer import Token, tokenize
from rpncalc.ops import INT64


def types(tokens):
    return [t.type for t in tokens]


def test_numbers_and_operators():
    tokens = tokenize("5 1 2 + 4 * + 3 -")

    assert types(tokens) == ['number', 'number', 'number', '+', 'number', '*', '+', 'number', '-']
    assert [t.value for t in tokens if t.type == 'number'] == [5, 1, 2, 4, 3]


def test_signed_numbers():
    tokens = tokenize("-7 +3 - +")

    assert tokens == [
        Token('number', -7, '-7'),
        Token('number', 3, '+3'),
        Token('-', None, '-'),
        Token('+', None, '+'),
    ]


def test_all_operators():
    assert types(tokenize("+ - * / %")) == ['+', '-', '*', '/', '%']


def test_invalid_words():
    tokens = tokenize("x 1.5 1_000 -- 3a ٣")

    assert types(tokens) == ['invalid'] * 6
    assert [t.value for t in tokens] == ['x', '1.5', '1_000', '--', '3a', '٣']


def test_empty_line():
    assert tokenize("") == []
    assert tokenize(" \t \n") == []


def test_literal_range():
    assert types(tokenize("2147483647 -2147483648")) == ['number', 'number']
    assert types(tokenize("2147483648 -2147483649")) == ['invalid', 'invalid']
    assert types(tokenize("2147483648", INT64)) == ['number']
