r"""
Locate the pieces of a table cell that should be typeset in math mode.

A math token is one of:

- a run of decimal digits, e.g. ``2024``;
- a control word, i.e., a backslash followed by a run of letters, e.g.
  ``\alpha``;
- a control symbol, i.e., a backslash followed by exactly one of the characters
  ``#$%&_{}``, e.g. ``\%``.

Tokens are found by scanning the string once from left to right.  At each
position the longest token starting there is taken, and scanning resumes right
after it, so tokens never overlap.
"""

import logging
logger = logging.getLogger(__name__)

from dataclasses import dataclass


_digit_chars = frozenset('0123456789')
_letter_chars = frozenset('abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ')
_specialchar_chars = frozenset('#$%&_{}')

default_math_delimiters = ('\\( ', ' \\)')


@dataclass(frozen=True)
class MathToken:
    kind: str
    r"""
    One of 'digits', 'macro' or 'specialchar'.
    """

    text: str

    pos: int
    r"""
    Index of the first character of the token in the scanned string.
    """

    @property
    def pos_end(self):
        return self.pos + len(self.text)


def _scan_run(s, pos, charset):
    # index of the first character at or after `pos` not in `charset`
    while pos < len(s) and s[pos] in charset:
        pos += 1
    return pos


def match_math_token(s, pos):
    r"""
    Return the :py:class:`MathToken` starting exactly at index `pos` of `s`, or
    `None` if no token starts there.
    """
    c = s[pos]

    if c in _digit_chars:
        end = _scan_run(s, pos, _digit_chars)
        return MathToken('digits', s[pos:end], pos)

    if c == '\\' and pos + 1 < len(s):
        nc = s[pos+1]
        if nc in _letter_chars:
            end = _scan_run(s, pos+1, _letter_chars)
            return MathToken('macro', s[pos:end], pos)
        if nc in _specialchar_chars:
            return MathToken('specialchar', s[pos:pos+2], pos)

    return None


def iter_math_tokens(s):
    r"""
    Yield all math tokens of `s`, in order of appearance.
    """
    pos = 0
    while pos < len(s):
        tok = match_math_token(s, pos)
        if tok is None:
            pos += 1
            continue
        yield tok
        pos = tok.pos_end


def wrap_math_tokens(s, delimiters=None):
    r"""
    Return a copy of `s` in which every math token is surrounded by the given
    pair of `(open, close)` math delimiters, ``\( `` and `` \)`` by default.
    Characters outside tokens are copied through unchanged.
    """
    if delimiters is None:
        delimiters = default_math_delimiters
    math_open, math_close = delimiters

    parts = []
    pos = 0
    for tok in iter_math_tokens(s):
        parts.append(s[pos:tok.pos])
        parts.append(math_open + tok.text + math_close)
        pos = tok.pos_end
    parts.append(s[pos:])

    return ''.join(parts)
