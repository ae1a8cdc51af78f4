import io

import pytest
from hypothesis import given, strategies as st

from skim.errors import SkimSyntaxError
from skim.reader.parser import (
    Reader,
    TokenStream,
    UnterminatedString,
    lex,
    parse_atom,
    read_all,
    read_one,
    reader_for,
)
from skim.syntax import (
    BooleanSyntax,
    ListSyntax,
    NumberSyntax,
    RationalSyntax,
    StringSyntax,
    SymbolSyntax,
)


def L(*items):
    return ListSyntax(tuple(items))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", [("lparen", "("), ("symbol", "+"), ("symbol", "1"), ("symbol", "2"), ("rparen", ")")]),
        ("'x", [("quote", "'"), ("symbol", "x")]),
        ("[a]", [("lparen", "["), ("symbol", "a"), ("rparen", "]")]),
        ('"a b"', [("string", '"a b"')]),
        ("; comment\n42", [("symbol", "42")]),
        ("   ", []),
    ],
)
def test_lex(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("42", NumberSyntax(42)),
        ("-7", NumberSyntax(-7)),
        ("+5", NumberSyntax(5)),
        ("1/2", RationalSyntax(1, 2)),
        ("-3/6", RationalSyntax(-3, 6)),
        ("#t", BooleanSyntax(True)),
        ("#f", BooleanSyntax(False)),
        ("#true", BooleanSyntax(True)),
        ("#F", BooleanSyntax(False)),
        ("foo", SymbolSyntax("foo")),
        ("1e-3", SymbolSyntax("1e-3")),
        (".5", SymbolSyntax(".5")),
        ("1/-2", SymbolSyntax("1/-2")),
    ],
)
def test_parse_atom(text, expected):
    assert parse_atom(text) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", [L(SymbolSyntax("+"), NumberSyntax(1), NumberSyntax(2))]),
        ("'x", [L(SymbolSyntax("quote"), SymbolSyntax("x"))]),
        ("'(1 . 2)", [L(SymbolSyntax("quote"), L(NumberSyntax(1), SymbolSyntax("."), NumberSyntax(2)))]),
        ("[let ([x 1]) x]", [L(SymbolSyntax("let"), L(L(SymbolSyntax("x"), NumberSyntax(1))), SymbolSyntax("x"))]),
        ("()", [L()]),
        ('"a\\nb\\"c"', [StringSyntax('a\nb"c')]),
        ("1 2 ; three\n", [NumberSyntax(1), NumberSyntax(2)]),
        ("", []),
    ],
)
def test_read_all(source, expected):
    assert read_all(source) == expected


@pytest.mark.parametrize("source", ["(1 2", ")", "'", "(a (b)"])
def test_read_all_syntax_errors(source):
    with pytest.raises(SkimSyntaxError):
        read_all(source)


def test_unterminated_string_in_lexer():
    with pytest.raises(UnterminatedString):
        list(lex('"abc'))


def test_reader_reads_one_datum_at_a_time():
    stream = io.StringIO("1\n2\n")
    reader = Reader(stream)
    assert reader.read() == NumberSyntax(1)
    # the second line has not been pulled yet
    assert stream.tell() == 2
    assert reader.read() == NumberSyntax(2)
    assert reader.read() is None


def test_reader_joins_lines_for_forms_and_strings():
    reader = Reader(io.StringIO('(define x\n  1)\n"multi\nline"\n'))
    assert reader.read() == L(SymbolSyntax("define"), SymbolSyntax("x"), NumberSyntax(1))
    assert reader.read() == StringSyntax("multi\nline")
    assert reader.read() is None


def test_reader_unterminated_string_at_eof():
    reader = Reader(io.StringIO('"abc\n'))
    with pytest.raises(SkimSyntaxError):
        reader.read()


def test_reader_recovers_after_error():
    reader = Reader(io.StringIO(") 1\n2\n"))
    with pytest.raises(SkimSyntaxError):
        reader.read()
    reader.recover()
    assert reader.read() == NumberSyntax(2)
    assert reader.read() is None


def test_reader_for_is_per_stream():
    stream = io.StringIO("a b")
    assert reader_for(stream) is reader_for(stream)
    assert read_one(stream) == SymbolSyntax("a")
    assert read_one(stream) == SymbolSyntax("b")
    assert read_one(stream) is None


def test_token_stream_peek_does_not_consume():
    stream = TokenStream(lex("x"))
    assert stream.peek() == ("symbol", "x")
    assert stream.advance() == ("symbol", "x")
    assert stream.peek() == (None, None)


# -------------------------------
# Hypothesis tests
# -------------------------------
atom_strat = st.one_of(
    st.integers(min_value=-10**6, max_value=10**6).map(str),
    st.sampled_from(["x", "foo", "+", "-", "#t", "#f", "1/2", '"s"', "set-car!"]),
)
sexpr_strat = st.recursive(atom_strat, lambda children: st.lists(children, max_size=5), max_leaves=20)


def _to_source(sexpr):
    if isinstance(sexpr, list):
        return f"({' '.join(_to_source(e) for e in sexpr)})"
    return sexpr


@given(sexpr_strat)
def test_parser_no_crash(sexpr):
    source = _to_source(sexpr)
    try:
        parsed = read_all(source)
    except Exception as e:
        assert False, f"Parser crashed on {source!r}: {e}"
    assert len(parsed) == 1


@given(sexpr_strat)
def test_printed_syntax_reads_back(sexpr):
    parsed = read_all(_to_source(sexpr))
    assert read_all(str(parsed[0])) == parsed
