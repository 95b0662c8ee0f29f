"""Polynomials held as ordered lists of terms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Term:
    """One term ``coefficient * x ** exponent``."""

    coefficient: int
    exponent: int


_TermLike = Union[Term, "tuple[int, int]"]

_STYLES = {
    "plain": ("{c}x^{e}", " + "),
    "compact": ("{c}x^{e}", "+"),
    "parenthesised": ("{c}(x^{e})", "+"),
}


class Polynomial:
    """A polynomial whose terms keep the order they were given in.

    Addition expects both operands to list their exponents in descending
    order, as a merge of the two term lists.
    """

    def __init__(self, terms: Iterable[_TermLike] = ()) -> None:
        self._terms: list[Term] = [
            term if isinstance(term, Term) else Term(*term) for term in terms
        ]

    def add(self, other: Polynomial) -> Polynomial:
        """Merge two polynomials, summing terms with equal exponents."""
        result: list[Term] = []
        mine, theirs = self._terms, other._terms
        i = j = 0
        while i < len(mine) and j < len(theirs):
            first, second = mine[i], theirs[j]
            if first.exponent == second.exponent:
                result.append(
                    Term(first.coefficient + second.coefficient, first.exponent)
                )
                i += 1
                j += 1
            elif first.exponent > second.exponent:
                result.append(first)
                i += 1
            else:
                result.append(second)
                j += 1
        result.extend(mine[i:])
        result.extend(theirs[j:])
        return Polynomial(result)

    def multiply(self, other: Polynomial) -> Polynomial:
        """Multiply every pair of terms, then combine like terms.

        The longer polynomial (or this one, on a tie) drives the outer loop.
        """
        outer, inner = (
            (self._terms, other._terms)
            if len(self) >= len(other)
            else (other._terms, self._terms)
        )
        products = Polynomial(
            Term(a.coefficient * b.coefficient, a.exponent + b.exponent)
            for a in outer
            for b in inner
        )
        return products.combine_like_terms()

    def combine_like_terms(self) -> Polynomial:
        """Sum terms sharing an exponent into the first of them."""
        totals: dict[int, int] = {}
        for term in self._terms:
            totals[term.exponent] = totals.get(term.exponent, 0) + term.coefficient
        return Polynomial(Term(c, e) for e, c in totals.items())

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.multiply(other)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def format(self, style: str = "plain") -> str:
        """Render the terms: ``plain`` gives ``3x^2 + 1x^0``, ``compact``
        gives ``3x^2+1x^0`` and ``parenthesised`` gives ``3(x^2)+1(x^0)``."""
        try:
            pattern, separator = _STYLES[style]
        except KeyError:
            raise ValueError(f"unknown style {style!r}") from None
        return separator.join(
            pattern.format(c=term.coefficient, e=term.exponent) for term in self._terms
        )

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        pairs = [(t.coefficient, t.exponent) for t in self._terms]
        return f"Polynomial({pairs!r})"