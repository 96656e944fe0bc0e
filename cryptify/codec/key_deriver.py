"""
Shift derivation from a user-entered key.

The shift is the sum of the decimal digits in the key. Every non-digit
character is discarded first, so "a1b2c3" and "123" derive the same shift.
Digits are summed from the string directly, so keys of any length are exact.
"""

_ASCII_DIGITS = frozenset('0123456789')


class KeyDerivationError(ValueError):
    """Key string cannot be turned into a usable shift."""
    pass


class NonPositiveKeyError(KeyDerivationError):
    """Key derives to a shift of zero (no digits, or only zeros)."""

    def __init__(self, message: str = "Key must result in a non-zero value."):
        super().__init__(message)


def filter_digits(key_string: str) -> str:
    """
    Keep only the ASCII decimal digits of a key.

    Args:
        key_string: Raw key text as entered by the user

    Returns:
        String of '0'-'9' characters in their original order (may be empty)
    """
    return ''.join(ch for ch in key_string if ch in _ASCII_DIGITS)


def normalize_digits(digits: str) -> str:
    """
    Canonical decimal form of a digit string.

    Leading zeros are dropped and an empty string reads as "0", the same
    value a numeric parse would produce.
    """
    return digits.lstrip('0') or '0'


def digit_sum(digits: str) -> int:
    """Sum of the decimal digit values in a digit-only string."""
    return sum(ord(ch) - ord('0') for ch in digits)


def derive_shift(key_string: str) -> int:
    """
    Derive the byte shift for a key.

    Args:
        key_string: Raw key text

    Returns:
        Strictly positive shift

    Raises:
        NonPositiveKeyError: If the key has no digits or only zeros

    Example:
        >>> derive_shift("1234")
        10
    """
    shift = digit_sum(normalize_digits(filter_digits(key_string)))
    if shift <= 0:
        raise NonPositiveKeyError()
    return shift
