"""Witness generation and constraints showing that a wide polynomial is divisible by a modulus.

A number given as 2 * N_LIMBS - 1 signed limbs is divisible by the modulus
``m`` when there is a quotient ``q`` and an auxiliary polynomial ``s`` with

    q(x) * m(x) + (x - 2**16) * s(x) - input(x) = 0

as polynomials. The quotient is stored as a sign bit and absolute limbs,
and ``s`` is stored shifted by an offset and split into low and high
16-bit halves so that every stored column fits in 16 bits.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from bnmodular.columns import LIMB_BITS, N_LIMBS, bigint_to_columns, columns_to_bigint
from bnmodular.field import GoldilocksField
from bnmodular.polynomial import (
    pol_add_assign,
    pol_adjoin_root,
    pol_mul_wide2,
    pol_remove_root_2exp,
    pol_sub_assign,
)

AUX_COEFF_ABS_MAX = 1 << 29
MODULUS_AUX_ZERO_LEN = 5 * N_LIMBS

_WIDE_LEN = 2 * N_LIMBS - 1
_LIMB_MASK = (1 << LIMB_BITS) - 1


class ConstraintError(Exception):
    """Raised when a constraint does not evaluate to zero."""


@dataclass
class ModulusZeroAux:
    """Auxiliary columns proving divisibility by the modulus.

    Every field except ``quot_abs`` is expected to lie in [0, 2**16).
    """

    is_quot_positive: Any
    quot_abs: list[Any]
    aux_input_lo: list[Any]
    aux_input_hi: list[Any]


def _is_zero(value: Any) -> bool:
    if isinstance(value, int):
        return value == 0
    return value.is_zero()


def generate_modulus_zero(modulus: int, input: Sequence[int]) -> ModulusZeroAux:
    """Build the auxiliary columns showing that ``input`` is a multiple of ``modulus``.

    ``input`` holds 2 * N_LIMBS - 1 signed limbs. Raises ValueError if the
    value they encode is not divisible by ``modulus`` or if an auxiliary
    coefficient falls out of range.
    """
    if len(input) != _WIDE_LEN:
        raise ValueError(f"expected {_WIDE_LEN} limbs, got {len(input)}")
    value = columns_to_bigint(input)
    if value % modulus != 0:
        raise ValueError("input is not divisible by the modulus")

    modulus_limbs = bigint_to_columns(modulus, N_LIMBS)
    quot = value // modulus
    is_quot_positive = GoldilocksField(1 if quot > 0 else 0)
    quot_limbs = bigint_to_columns(quot, N_LIMBS + 1)
    quot_abs_limbs = bigint_to_columns(abs(quot), N_LIMBS + 1)

    # constr_poly = input(x) - q(x) * m(x)
    constr_poly = list(input) + [0]
    pol_sub_assign(constr_poly, pol_mul_wide2(quot_limbs, modulus_limbs))

    # s(x) = constr_poly(x) / (x - 2**16)
    aux_limbs = pol_remove_root_2exp(constr_poly, LIMB_BITS)
    if aux_limbs[-1] != 0:
        raise ValueError("quotient polynomial has a non-zero top coefficient")
    aux_limbs = [c + AUX_COEFF_ABS_MAX for c in aux_limbs]
    if any(abs(c) > 2 * AUX_COEFF_ABS_MAX for c in aux_limbs):
        raise ValueError("auxiliary coefficient out of range")

    aux = ModulusZeroAux(
        is_quot_positive=is_quot_positive,
        quot_abs=[GoldilocksField(limb) for limb in quot_abs_limbs],
        aux_input_lo=[GoldilocksField(c & _LIMB_MASK) for c in aux_limbs[:_WIDE_LEN]],
        aux_input_hi=[
            GoldilocksField((c >> LIMB_BITS) & _LIMB_MASK) for c in aux_limbs[:_WIDE_LEN]
        ],
    )
    assert_modulus_zero(
        GoldilocksField(1),
        [GoldilocksField(limb) for limb in modulus_limbs],
        [GoldilocksField(limb) for limb in input],
        aux,
    )
    return aux


def eval_modulus_zero(
    filter: Any,
    modulus: Sequence[Any],
    input: Sequence[Any],
    aux: ModulusZeroAux,
) -> list[Any]:
    """Return the constraint values that vanish when ``input`` is divisible by ``modulus``.

    The first value checks that the quotient sign is a bit; the remaining
    2 * N_LIMBS values are the coefficients of the divisibility identity.
    Every value is multiplied by ``filter``.
    """
    if len(modulus) != N_LIMBS:
        raise ValueError(f"expected {N_LIMBS} modulus limbs, got {len(modulus)}")
    if len(input) != _WIDE_LEN:
        raise ValueError(f"expected {_WIDE_LEN} input limbs, got {len(input)}")

    sign_bit = aux.is_quot_positive
    constraints = [filter * (sign_bit * sign_bit - sign_bit)]

    quot_sign = 2 * sign_bit - 1
    quot = [quot_sign * limb for limb in aux.quot_abs]

    # constr_poly = q(x) * m(x)
    constr_poly = pol_mul_wide2(quot, list(modulus))
    base = 1 << LIMB_BITS

    # constr_poly += (x - base) * s(x)
    aux_poly: list[Any] = [
        lo - AUX_COEFF_ABS_MAX + base * hi
        for lo, hi in zip(aux.aux_input_lo, aux.aux_input_hi)
    ]
    aux_poly.append(0)
    pol_add_assign(constr_poly, pol_adjoin_root(aux_poly, base))

    pol_sub_assign(constr_poly, list(input))
    constraints.extend(filter * c for c in constr_poly)
    return constraints


def assert_modulus_zero(
    filter: Any,
    modulus: Sequence[Any],
    input: Sequence[Any],
    aux: ModulusZeroAux,
) -> None:
    """Raise ConstraintError unless every divisibility constraint evaluates to zero."""
    for index, value in enumerate(eval_modulus_zero(filter, modulus, input, aux)):
        if not _is_zero(value):
            raise ConstraintError(f"constraint {index} does not vanish: {value!r}")