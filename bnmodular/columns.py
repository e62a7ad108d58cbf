"""Conversion between integers and signed 16-bit limb columns."""

from __future__ import annotations

from collections.abc import Sequence

LIMB_BITS = 16
N_LIMBS = 16

_LIMB_MASK = (1 << LIMB_BITS) - 1


def columns_to_bigint(limbs: Sequence[int]) -> int:
    """Return the integer whose base-2**16 digits are ``limbs``.

    The limbs may be negative or larger than 16 bits; the result is the
    polynomial formed by the limbs evaluated at 2**16.
    """
    return sum(limb * (1 << (LIMB_BITS * i)) for i, limb in enumerate(limbs))


def bigint_to_columns(num: int, n: int = N_LIMBS) -> list[int]:
    """Split ``num`` into ``n`` 16-bit limbs, least significant first.

    A negative number gives the negated limbs of its absolute value.
    Raises ValueError if the number needs more than ``16 * n`` bits.
    """
    magnitude = abs(num)
    if magnitude.bit_length() > LIMB_BITS * n:
        raise ValueError(
            f"{magnitude.bit_length()}-bit value does not fit in {n} limbs"
        )
    limbs = [(magnitude >> (LIMB_BITS * i)) & _LIMB_MASK for i in range(n)]
    if num < 0:
        return [-limb for limb in limbs]
    return limbs