import dataclasses
import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from bnmodular.columns import N_LIMBS, bigint_to_columns
from bnmodular.field import GoldilocksField
from bnmodular.modulus import bn254_base_modulus, bn254_base_modulus_columns, fq_to_columns
from bnmodular.modulus_zero import (
    MODULUS_AUX_ZERO_LEN,
    ConstraintError,
    ModulusZeroAux,
    assert_modulus_zero,
    eval_modulus_zero,
    generate_modulus_zero,
)
from bnmodular.polynomial import pol_mul_wide, pol_sub_normal

P = bn254_base_modulus()


def _mul_diff(a, b):
    c = a * b % P
    c_full = fq_to_columns(c) + [0] * (N_LIMBS - 1)
    return pol_sub_normal(pol_mul_wide(fq_to_columns(a), fq_to_columns(b)), c_full)


def _field(limbs):
    return [GoldilocksField(x) for x in limbs]


def _all_zero(values):
    return all(v.is_zero() for v in values)


def test_random_products_satisfy_constraints():
    rng = random.Random(1234)
    for _ in range(10):
        a = rng.randrange(P)
        b = rng.randrange(P)
        diff = _mul_diff(a, b)
        aux = generate_modulus_zero(P, diff)
        constraints = eval_modulus_zero(
            GoldilocksField(1), bn254_base_modulus_columns(), _field(diff), aux
        )
        assert [int(c) for c in constraints] == [0] * (2 * N_LIMBS + 1)


@settings(max_examples=20, deadline=None)
@given(st.integers(0, P - 1), st.integers(0, P - 1))
def test_aux_columns_are_in_range(a, b):
    aux = generate_modulus_zero(P, _mul_diff(a, b))
    assert int(aux.is_quot_positive) in (0, 1)
    assert all(0 <= int(v) < 1 << 16 for v in aux.aux_input_lo)
    assert all(0 <= int(v) < 1 << 16 for v in aux.aux_input_hi)
    assert len(aux.quot_abs) == N_LIMBS + 1
    total = 1 + len(aux.quot_abs) + len(aux.aux_input_lo) + len(aux.aux_input_hi)
    assert total == MODULUS_AUX_ZERO_LEN


def test_largest_elements():
    diff = _mul_diff(P - 1, P - 1)
    aux = generate_modulus_zero(P, diff)
    assert aux.is_quot_positive == GoldilocksField(1)
    assert _all_zero(
        eval_modulus_zero(GoldilocksField(1), bn254_base_modulus_columns(), _field(diff), aux)
    )


def test_zero_input_has_zero_quotient():
    aux = generate_modulus_zero(P, [0] * (2 * N_LIMBS - 1))
    assert aux.is_quot_positive == GoldilocksField(0)
    assert all(v.is_zero() for v in aux.quot_abs)


def test_positive_and_negative_quotient():
    pad = [0] * (N_LIMBS - 1)
    positive = generate_modulus_zero(P, bigint_to_columns(P, N_LIMBS) + pad)
    negative = generate_modulus_zero(P, bigint_to_columns(-P, N_LIMBS) + pad)
    one = _field(bigint_to_columns(1, N_LIMBS + 1))
    assert positive.is_quot_positive == GoldilocksField(1)
    assert positive.quot_abs == one
    assert negative.is_quot_positive == GoldilocksField(0)
    assert negative.quot_abs == one


def test_not_divisible_raises():
    diff = [1] + [0] * (2 * N_LIMBS - 2)
    with pytest.raises(ValueError):
        generate_modulus_zero(P, diff)


def test_wrong_input_length_raises():
    with pytest.raises(ValueError):
        generate_modulus_zero(P, [0] * N_LIMBS)


def test_constraint_count():
    diff = _mul_diff(3, 5)
    aux = generate_modulus_zero(P, diff)
    constraints = eval_modulus_zero(
        GoldilocksField(1), bn254_base_modulus_columns(), _field(diff), aux
    )
    assert len(constraints) == 33


def test_tampered_quotient_is_rejected():
    diff = _mul_diff(P - 2, P - 3)
    aux = generate_modulus_zero(P, diff)
    bad = dataclasses.replace(aux, quot_abs=[aux.quot_abs[0] + 1] + aux.quot_abs[1:])
    with pytest.raises(ConstraintError):
        assert_modulus_zero(GoldilocksField(1), bn254_base_modulus_columns(), _field(diff), bad)


def test_non_bit_sign_is_rejected():
    diff = _mul_diff(7, 11)
    aux = generate_modulus_zero(P, diff)
    bad = dataclasses.replace(aux, is_quot_positive=GoldilocksField(2))
    constraints = eval_modulus_zero(
        GoldilocksField(1), bn254_base_modulus_columns(), _field(diff), bad
    )
    assert not constraints[0].is_zero()


def test_zero_filter_disables_constraints():
    diff = _mul_diff(P - 2, P - 3)
    aux = generate_modulus_zero(P, diff)
    bad = ModulusZeroAux(
        is_quot_positive=GoldilocksField(5),
        quot_abs=[GoldilocksField(9)] * (N_LIMBS + 1),
        aux_input_lo=aux.aux_input_lo,
        aux_input_hi=aux.aux_input_hi,
    )
    constraints = eval_modulus_zero(
        GoldilocksField(0), bn254_base_modulus_columns(), _field(diff), bad
    )
    assert [int(c) for c in constraints] == [0] * (2 * N_LIMBS + 1)


def test_wrong_modulus_length_raises():
    diff = _mul_diff(2, 3)
    aux = generate_modulus_zero(P, diff)
    with pytest.raises(ValueError):
        eval_modulus_zero(GoldilocksField(1), bn254_base_modulus_columns()[:-1], _field(diff), aux)