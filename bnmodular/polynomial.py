"""Coefficient-list polynomial helpers over integers or field elements.

Polynomials are lists of coefficients, lowest degree first.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any


def pol_zero(n: int) -> list[int]:
    """Return a polynomial of ``n`` zero coefficients."""
    return [0] * n


def _require_same_length(a: Sequence[Any], b: Sequence[Any]) -> None:
    if len(a) != len(b):
        raise ValueError(f"expected equal lengths, got {len(a)} and {len(b)}")


def _require_not_shorter(a: Sequence[Any], b: Sequence[Any]) -> None:
    if len(a) < len(b):
        raise ValueError(f"expected {len(a)} >= {len(b)}")


def _pad(coeffs: list[Any], length: int) -> list[Any]:
    return coeffs + pol_zero(length - len(coeffs))


def pol_add_assign(a: MutableSequence[Any], b: Sequence[Any]) -> None:
    """Add ``b`` into ``a`` in place; ``a`` must be at least as long as ``b``."""
    _require_not_shorter(a, b)
    for i, coeff in enumerate(b):
        a[i] += coeff


def pol_add(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Return a + b, zero-padded to the width of a wide product."""
    _require_same_length(a, b)
    return _pad([x + y for x, y in zip(a, b)], 2 * len(a) - 1)


def pol_add_normal(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Return a + b with the same length as the inputs."""
    _require_same_length(a, b)
    return [x + y for x, y in zip(a, b)]


def pol_sub(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Return a - b, zero-padded to the width of a wide product."""
    _require_same_length(a, b)
    return _pad([x - y for x, y in zip(a, b)], 2 * len(a) - 1)


def pol_sub_normal(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Return a - b with the same length as the inputs."""
    _require_same_length(a, b)
    return [x - y for x, y in zip(a, b)]


def pol_sub_assign(a: MutableSequence[Any], b: Sequence[Any]) -> None:
    """Subtract ``b`` from ``a`` in place; ``a`` must be at least as long as ``b``."""
    _require_not_shorter(a, b)
    for i, coeff in enumerate(b):
        a[i] -= coeff


def _mul(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    res: list[Any] = pol_zero(len(a) + len(b) - 1)
    for i, ai in enumerate(a):
        for j, bj in enumerate(b):
            res[i + j] += ai * bj
    return res


def pol_mul_wide(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Return a * b for two polynomials of equal length n (2n - 1 coefficients)."""
    _require_same_length(a, b)
    if not a:
        raise ValueError("cannot multiply empty polynomials")
    return _mul(a, b)


def pol_mul_wide2(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Return a * b where ``a`` has one more coefficient than ``b`` (2n coefficients)."""
    if len(a) != len(b) + 1:
        raise ValueError(f"expected len(a) == len(b) + 1, got {len(a)} and {len(b)}")
    if not b:
        raise ValueError("cannot multiply empty polynomials")
    return _mul(a, b)


def pol_mul_scalar(a: Sequence[Any], c: Any) -> list[Any]:
    """Return every coefficient of ``a`` multiplied by ``c``."""
    return [c * coeff for coeff in a]


def pol_adjoin_root(a: Sequence[Any], root: Any) -> list[Any]:
    """Return (x - root) * a(x) in the same number of coefficients as ``a``.

    The top coefficient of ``a`` is expected to be zero; otherwise the
    highest term of the product is dropped.
    """
    if not a:
        raise ValueError("polynomial must have at least one coefficient")
    return [-root * a[0]] + [prev - root * cur for prev, cur in zip(a, a[1:])]


def pol_remove_root_2exp(a: Sequence[int], exp: int) -> list[int]:
    """Return q with a(x) = (x - 2**exp) * q(x), in as many coefficients as ``a``.

    The divisibility is not checked; if 2**exp is not a root the result is
    meaningless. The last coefficient of the result is always zero.
    """
    if not a:
        raise ValueError("polynomial must have at least one coefficient")
    quotient = [-(a[0] >> exp)]
    for coeff in a[1:-1]:
        quotient.append((quotient[-1] - coeff) >> exp)
    return _pad(quotient, len(a))