"""Limb-column arithmetic and divisibility constraints for the BN254 base field."""

__version__ = "0.1.0"
__all__ = ["columns", "polynomial", "field", "modulus", "modulus_zero", "is_modulus_zero"]