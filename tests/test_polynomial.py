import io
import sys

import pytest

from dsexercises.polynomial import (
    EMPTY_MESSAGE,
    Polynomial,
    Term,
    main,
    parse_term,
    read_polynomial,
)


def test_terms_are_sorted_by_exponent():
    p = Polynomial([Term(1, 5), Term(2, 0), Term(3, 2)])
    exps = [t.exp for t in p]
    assert exps == sorted(exps)
    assert len(p) == 3


def test_tuples_are_accepted_as_terms():
    p = Polynomial([(4.0, 1)])
    assert list(p) == [Term(4.0, 1)]


def test_adding_negation_gives_empty_polynomial():
    p = Polynomial([Term(1, 1), Term(2, 3), Term(-7, 4)])
    neg = Polynomial(Term(-t.coef, t.exp) for t in p)
    total = p + neg
    assert len(total) == 0
    assert str(total) == EMPTY_MESSAGE


def test_equal_exponents_are_combined():
    total = Polynomial([Term(1.5, 2)]) + Polynomial([Term(2.5, 2)])
    assert list(total) == [Term(4.0, 2)]


def test_addition_is_commutative():
    a = Polynomial([Term(1, 0), Term(2, 3), Term(5, 7)])
    b = Polynomial([Term(4, 1), Term(-2, 3), Term(6, 9)])
    assert list(a + b) == list(b + a)


def test_distinct_exponents_all_kept_in_order():
    a = Polynomial([Term(1, 0), Term(2, 4)])
    b = Polynomial([Term(3, 1), Term(4, 6)])
    total = list(a + b)
    assert [t.exp for t in total] == sorted(t.exp for t in list(a) + list(b))
    assert len(total) == len(a) + len(b)


def test_addition_leaves_operands_unchanged():
    a = Polynomial([Term(1, 2)])
    b = Polynomial([Term(2, 2)])
    _ = a + b
    assert list(a) == [Term(1, 2)]
    assert list(b) == [Term(2, 2)]


def test_str_format_with_constant_first():
    assert str(Polynomial([Term(3, 2), Term(2, 0)])) == "2+3x^2"


def test_str_first_term_with_power():
    assert str(Polynomial([Term(-1.5, 3)])) == "-1.5x^3"


def test_adding_non_polynomial_raises():
    with pytest.raises(TypeError):
        Polynomial() + 1


def test_parse_term_values():
    assert parse_term("1.5,2") == (1.5, 2)
    assert parse_term(" -3 4") == (-3.0, 4)


@pytest.mark.parametrize("text", ["", "abc", "1", "1,", "1,x", "123", "1 , 2"])
def test_parse_term_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_term(text)


def test_read_polynomial_retries_and_sorts():
    inp = io.StringIO("1,2\nbad\n3,0\n0,0\n")
    out = io.StringIO()
    p = read_polynomial(inp, out)
    assert list(p) == [Term(3, 0), Term(1, 2)]
    assert out.getvalue().count("Invalid format") == 1
    assert out.getvalue().endswith(f"{p}\n\n")


def test_read_polynomial_eof():
    with pytest.raises(EOFError):
        read_polynomial(io.StringIO("1,2\n"), io.StringIO())


def test_main_prints_sum(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1,1\n2,3\n0,0\n-1,1\n5,0\n0,0\n"))
    rc = main([])
    out = capsys.readouterr().out
    expected = Polynomial([Term(1, 1), Term(2, 3)]) + Polynomial([Term(-1, 1), Term(5, 0)])
    assert rc == 0
    assert len(expected) == 2
    assert out.endswith(f"{expected}\n\n")


def test_main_returns_error_on_eof(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1,1\n"))
    assert main([]) == 1