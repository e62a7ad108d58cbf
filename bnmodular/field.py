"""Arithmetic in the 64-bit Goldilocks prime field."""

from __future__ import annotations

ORDER = (1 << 64) - (1 << 32) + 1


class GoldilocksField:
    """An element of the field of integers modulo 2**64 - 2**32 + 1."""

    __slots__ = ("value",)

    def __init__(self, value: int = 0) -> None:
        self.value = int(value) % ORDER

    @staticmethod
    def _coerce(other: object) -> int | None:
        if isinstance(other, GoldilocksField):
            return other.value
        if isinstance(other, int):
            return other % ORDER
        return None

    def __add__(self, other: object) -> GoldilocksField:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return GoldilocksField(self.value + value)

    def __radd__(self, other: object) -> GoldilocksField:
        return self.__add__(other)

    def __sub__(self, other: object) -> GoldilocksField:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return GoldilocksField(self.value - value)

    def __rsub__(self, other: object) -> GoldilocksField:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return GoldilocksField(value - self.value)

    def __mul__(self, other: object) -> GoldilocksField:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return GoldilocksField(self.value * value)

    def __rmul__(self, other: object) -> GoldilocksField:
        return self.__mul__(other)

    def __neg__(self) -> GoldilocksField:
        return GoldilocksField(-self.value)

    def is_zero(self) -> bool:
        """Return True for the additive identity."""
        return self.value == 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GoldilocksField):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"GoldilocksField({self.value})"