"""Identifier rules.

A name may coincide with a primitive or a reserved word, but it may not look
like a number: the reader's numeric reading takes priority, so a token such as
`+123`, `.5` or `1e-3` is never a variable.
"""

from __future__ import annotations

from skim.errors import SkimInvalidSymbol

FORBIDDEN_START = frozenset(".@")
FORBIDDEN_CHARS = frozenset("#'\"`")


def is_numeric_token(text: str) -> bool:
    """Sign, digits with at most one '.', then an optional exponent."""
    if not text:
        return False
    i = 0
    n = len(text)
    if text[i] in "+-":
        i += 1
    has_digit = has_dot = False
    while i < n:
        c = text[i]
        if c.isdigit():
            has_digit = True
        elif c == ".":
            if has_dot:
                return False
            has_dot = True
        elif c in "eE":
            if not has_digit:
                return False
            i += 1
            if i < n and text[i] in "+-":
                i += 1
            if i >= n:
                return False
            return all(ch.isdigit() for ch in text[i:])
        else:
            return False
        i += 1
    return has_digit


def validate_variable_name(name: str) -> str:
    if not name:
        raise SkimInvalidSymbol("Invalid variable name: empty")
    if name[0].isdigit() or name[0] in FORBIDDEN_START:
        raise SkimInvalidSymbol(f"Invalid variable name {name!r}: starts with invalid character")
    for c in name:
        if c in FORBIDDEN_CHARS:
            raise SkimInvalidSymbol(f"Invalid variable name {name!r}: contains forbidden character {c!r}")
    if is_numeric_token(name):
        raise SkimInvalidSymbol(f"Invalid variable name {name!r}: numeric format is prioritized as literal")
    return name
