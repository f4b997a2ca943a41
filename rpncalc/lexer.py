from .common import trace
from .ops import OPERATORS, INT32
import re


class Token:
    def __init__(self, type, value, text):
        self.type = type
        self.value = value
        self.text = text

    def __repr__(self):
        return f"Token('{self.type}', {self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value, self.text) == (other.type, other.value, other.text)


def tok_word(word, model=INT32):
    # 'number': [+-]?[0-9]+, within the range of the integer model
    # \0: [-+*/%]
    # 'invalid': anything else
    if re.fullmatch('[+-]?[0-9]+', word):
        value = int(word)
        if model.fits(value):
            return Token('number', value, word)
        return Token('invalid', word, word)

    if word in OPERATORS:
        return Token(word, None, word)

    return Token('invalid', word, word)


@trace
def tokenize(s, model=INT32):
    return [tok_word(w, model) for w in s.split()]
