"""Key derivation and byte-shift codec."""

from .key_deriver import (
    KeyDerivationError,
    NonPositiveKeyError,
    derive_shift,
    digit_sum,
    filter_digits,
    normalize_digits,
)
from .byte_shift import ByteShiftCodec, Mode, effective_shift, transform

__all__ = [
    'KeyDerivationError',
    'NonPositiveKeyError',
    'derive_shift',
    'digit_sum',
    'filter_digits',
    'normalize_digits',
    'ByteShiftCodec',
    'Mode',
    'effective_shift',
    'transform',
]
