# bnmodular

`bnmodular` works with numbers modulo the BN254 base field prime. Each
number is written as a column of signed 16-bit limbs, which is the layout a
STARK trace uses. The package does two things. It builds the auxiliary
witness that shows a limb polynomial encodes a multiple of a modulus. It
then evaluates the matching constraints with arithmetic in the Goldilocks
field.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `bnmodular.columns` converts between integers and limb columns.
  - `bigint_to_columns(num, n=16)` splits a number into `n` 16-bit limbs,
    least significant first. A negative number gives negated limbs. It
    raises `ValueError` if the number does not fit.
  - `columns_to_bigint(limbs)` evaluates the limbs at 2^16. The limbs may
    be signed or wider than 16 bits.
- `bnmodular.polynomial` has helpers for coefficient lists, lowest degree
  first. They work on plain integers or on field elements:
  - `pol_zero`
  - `pol_add`, `pol_sub`, `pol_add_normal` and `pol_sub_normal`
  - the in-place forms `pol_add_assign` and `pol_sub_assign`
  - `pol_mul_wide`, `pol_mul_wide2` and `pol_mul_scalar`
  - `pol_adjoin_root(a, root)`, which multiplies by `(x - root)`
  - `pol_remove_root_2exp(a, exp)`, which divides by `(x - 2**exp)`

  When the input lengths do not fit together, these helpers raise
  `ValueError`.
- `bnmodular.field` provides `GoldilocksField`, the field of integers
  modulo 2^64 − 2^32 + 1. It supports `+`, `-`, `*` and unary `-`, mixed
  with plain integers, along with `is_zero()`, equality, hashing and
  `int()`.
- `bnmodular.modulus` provides:
  - `bn254_base_modulus()`, which gives the prime as an integer
  - `bn254_base_modulus_columns()`, which gives the prime as 16
    `GoldilocksField` limbs
  - `fq_to_columns(value)`, which reduces a value modulo the prime and
    returns its 16 integer limbs
- `bnmodular.modulus_zero`
  - `generate_modulus_zero(modulus, input)` takes 31 signed limbs and
    returns a `ModulusZeroAux`. That witness holds the quotient sign bit,
    the absolute quotient limbs, and the low and high halves of the
    auxiliary polynomial. It raises `ValueError` if the value is not
    divisible by the modulus, and it checks its own result before
    returning it.
  - `eval_modulus_zero(filter, modulus, input, aux)` returns the
    constraint values. They all vanish when the witness is valid.
  - `assert_modulus_zero(filter, modulus, input, aux)` raises
    `ConstraintError` if any of those constraint values is non-zero.
- `bnmodular.is_modulus_zero`
  - `generate_is_modulus_zero(modulus, input)` takes 16 signed limbs. It
    returns an is-zero flag as a `GoldilocksField`, together with an
    `IsModulusZeroAux`. That witness holds the inverse limbs and a
    divisibility witness for `input * inv - 1 + is_zero`.
  - `eval_is_modulus_zero(filter, modulus, input, is_zero, aux)` returns
    two sets of constraint values: the divisibility constraints, and the
    limbs of `is_zero * input` multiplied by `filter`.

## Example

```python
from bnmodular.modulus import bn254_base_modulus, fq_to_columns
from bnmodular.polynomial import pol_mul_wide, pol_sub_normal
from bnmodular.modulus_zero import generate_modulus_zero

p = bn254_base_modulus()
a, b = 12345, 67890
c = a * b % p

product = pol_mul_wide(fq_to_columns(a), fq_to_columns(b))
c_full = fq_to_columns(c) + [0] * (len(product) - len(fq_to_columns(c)))
diff = pol_sub_normal(product, c_full)

aux = generate_modulus_zero(p, diff)  # raises ValueError if a*b - c is not divisible by p
```

## What it does not do

The package only generates witnesses and evaluates constraints. It does
not include any of the following:

- a STARK prover or verifier
- trace assembly
- recursive circuit versions of the constraints
- elliptic-curve operations
- hashing to curve points