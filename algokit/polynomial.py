"""Polynomials stored as terms in descending order of power."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import NamedTuple


class Term(NamedTuple):
    coeff: int
    power: int

    def __str__(self) -> str:
        if self.power == 0:
            return f"{self.coeff} "
        return f"{self.coeff}x{self.power} + "


class Polynomial:
    """A sequence of terms, expected in descending order of power."""

    def __init__(self, terms: Iterable[tuple[int, int]] = ()) -> None:
        self._terms: list[Term] = []
        for coeff, power in terms:
            self.append(coeff, power)

    def append(self, coeff: int, power: int) -> None:
        self._terms.append(Term(coeff, power))

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial()
        left, right = iter(self), iter(other)
        a, b = next(left, None), next(right, None)
        while a is not None and b is not None:
            if a.power == b.power:
                result.append(a.coeff + b.coeff, a.power)
                a, b = next(left, None), next(right, None)
            elif a.power > b.power:
                result.append(*a)
                a = next(left, None)
            else:
                result.append(*b)
                b = next(right, None)
        for term, rest in ((a, left), (b, right)):
            if term is not None:
                result.append(*term)
                for remaining in rest:
                    result.append(*remaining)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __str__(self) -> str:
        return "".join(str(term) for term in self._terms)