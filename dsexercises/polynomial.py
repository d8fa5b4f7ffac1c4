"""Polynomials kept as exponent-ordered term lists, with addition and console input."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO, Union

EMPTY_MESSAGE = "The polynomial is empty!"

_NUMBER = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Term:
    """One term ``coef * x**exp`` of a polynomial."""

    coef: float
    exp: int


TermLike = Union[Term, tuple]


class Polynomial:
    """A polynomial whose terms are kept in ascending order of exponent."""

    def __init__(self, terms: Iterable[TermLike] = ()) -> None:
        converted = [t if isinstance(t, Term) else Term(*t) for t in terms]
        self._terms = sorted(converted, key=lambda term: term.exp)

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __repr__(self) -> str:
        return f"Polynomial({self._terms!r})"

    def __add__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        left, right = self._terms, other._terms
        merged: list[Term] = []
        i = j = 0
        while i < len(left) and j < len(right):
            a, b = left[i], right[j]
            if a.exp < b.exp:
                merged.append(a)
                i += 1
            elif a.exp > b.exp:
                merged.append(b)
                j += 1
            else:
                total = a.coef + b.coef
                if total != 0:
                    merged.append(Term(total, a.exp))
                i += 1
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        result = Polynomial()
        result._terms = merged
        return result

    def __str__(self) -> str:
        if not self._terms:
            return EMPTY_MESSAGE
        first, *rest = self._terms
        if first.exp == 0:
            parts = [f"{first.coef:g}"]
        else:
            parts = [f"{first.coef:g}x^{first.exp}"]
        parts.extend(f"{term.coef:+g}x^{term.exp}" for term in rest)
        return "".join(parts)


def parse_term(text: str) -> tuple[float, int]:
    """Parse ``coefficient<any one character>exponent``, such as ``1.5,2``."""
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f"no coefficient in {text!r}")
    rest = text[match.end():]
    if not rest:
        raise ValueError(f"no exponent in {text!r}")
    exponent_text = rest[1:].strip()
    if not _INTEGER.fullmatch(exponent_text):
        raise ValueError(f"invalid exponent in {text!r}")
    return float(match.group().strip()), int(exponent_text)


def _read_term(stdin: TextIO, stdout: TextIO) -> tuple[float, int]:
    while True:
        line = stdin.readline()
        if not line:
            raise EOFError("input ended before the terminating 0,0 term")
        try:
            return parse_term(line.rstrip("\r\n"))
        except ValueError:
            stdout.write("Invalid format! Enter again (x,p): ")


def read_polynomial(stdin: TextIO | None = None, stdout: TextIO | None = None) -> Polynomial:
    """Prompt for terms one per line until ``0,0`` and return the polynomial."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(
        "Enter the polynomial term by term as coefficient,exponent; finish with 0,0\n"
    )
    stdout.write("First term: ")
    terms: list[Term] = []
    while True:
        coef, exp = _read_term(stdin, stdout)
        if coef == 0 and exp == 0:
            break
        terms.append(Term(coef, exp))
        stdout.write("Next term: ")
    polynomial = Polynomial(terms)
    stdout.write("Polynomial built:\n")
    stdout.write(f"{polynomial}\n\n")
    return polynomial


def main(argv: list[str] | None = None) -> int:
    """Read two polynomials from standard input and print their sum."""
    parser = argparse.ArgumentParser(description="Add two polynomials read from input.")
    parser.parse_args(argv)
    out = sys.stdout
    try:
        out.write("Building polynomial ha:\n")
        ha = read_polynomial(sys.stdin, out)
        out.write("Building polynomial hb:\n")
        hb = read_polynomial(sys.stdin, out)
    except EOFError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    out.write("Sum of the polynomials:\n")
    out.write(f"{ha + hb}\n\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())