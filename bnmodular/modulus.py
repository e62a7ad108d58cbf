"""The BN254 base field modulus in integer and column form."""

from __future__ import annotations

from bnmodular.columns import N_LIMBS, bigint_to_columns
from bnmodular.field import GoldilocksField

_BN254_BASE_MODULUS = (
    21888242871839275222246405745257275088696311157297823662689037894645226208583
)


def bn254_base_modulus() -> int:
    """Return the prime modulus of the BN254 base field."""
    return _BN254_BASE_MODULUS


def bn254_base_modulus_columns() -> list[GoldilocksField]:
    """Return the modulus as 16-bit limbs embedded in the Goldilocks field."""
    return [GoldilocksField(limb) for limb in bigint_to_columns(_BN254_BASE_MODULUS, N_LIMBS)]


def fq_to_columns(value: int) -> list[int]:
    """Return the canonical BN254 base field element for ``value`` as 16-bit limbs."""
    return bigint_to_columns(value % _BN254_BASE_MODULUS, N_LIMBS)