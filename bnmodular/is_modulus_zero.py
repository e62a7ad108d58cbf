"""Witness generation and constraints deciding whether a value is zero modulo the modulus."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from bnmodular.columns import N_LIMBS, bigint_to_columns, columns_to_bigint
from bnmodular.field import GoldilocksField
from bnmodular.modulus_zero import (
    MODULUS_AUX_ZERO_LEN,
    ModulusZeroAux,
    eval_modulus_zero,
    generate_modulus_zero,
)
from bnmodular.polynomial import pol_mul_scalar, pol_mul_wide

IS_MODULUS_AUX_ZERO_LEN = N_LIMBS + MODULUS_AUX_ZERO_LEN


@dataclass
class IsModulusZeroAux:
    """The inverse of the input in limbs, with the divisibility witness for input * inv - 1."""

    inv: list[Any]
    modulus_zero_aux: ModulusZeroAux


def generate_is_modulus_zero(
    modulus: int, input: Sequence[int]
) -> tuple[GoldilocksField, IsModulusZeroAux]:
    """Return the zero flag for ``input`` modulo ``modulus`` and its auxiliary columns.

    ``input`` holds N_LIMBS signed limbs. The flag is one when the value is
    divisible by the modulus, otherwise zero and ``inv`` holds its inverse.
    """
    if len(input) != N_LIMBS:
        raise ValueError(f"expected {N_LIMBS} limbs, got {len(input)}")
    reduced = columns_to_bigint(input) % modulus
    inverse = pow(reduced, -1, modulus) if reduced else 0
    inv_limbs = bigint_to_columns(inverse, N_LIMBS)
    is_zero = 1 if inverse == 0 else 0

    # diff = input * inv - 1 + is_zero
    diff = pol_mul_wide(list(input), inv_limbs)
    diff[0] += is_zero - 1
    modulus_zero_aux = generate_modulus_zero(modulus, diff)
    return GoldilocksField(is_zero), IsModulusZeroAux(
        inv=[GoldilocksField(limb) for limb in inv_limbs],
        modulus_zero_aux=modulus_zero_aux,
    )


def eval_is_modulus_zero(
    filter: Any,
    modulus: Sequence[Any],
    input: Sequence[Any],
    is_zero: Any,
    aux: IsModulusZeroAux,
) -> list[Any]:
    """Return the constraint values tying ``is_zero`` to ``input`` modulo ``modulus``.

    They state that input * inv - 1 + is_zero is divisible by the modulus and
    that is_zero * input vanishes limb by limb, each multiplied by ``filter``.
    """
    if len(input) != N_LIMBS:
        raise ValueError(f"expected {N_LIMBS} input limbs, got {len(input)}")
    diff = pol_mul_wide(list(input), list(aux.inv))
    diff[0] += is_zero - 1
    constraints = eval_modulus_zero(filter, modulus, diff, aux.modulus_zero_aux)
    constraints.extend(filter * limb for limb in pol_mul_scalar(list(input), is_zero))
    return constraints