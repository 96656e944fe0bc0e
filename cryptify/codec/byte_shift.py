"""
Byte-shift codec.

Each byte is rotated by the shift modulo 256. Encrypting subtracts the shift
and decrypting adds it, so the two modes undo each other exactly. Bytes are
independent of their neighbours, which lets files be processed in chunks.
"""

from enum import Enum
from typing import Iterable, Iterator, Union

BytesLike = Union[bytes, bytearray, memoryview]


class Mode(Enum):
    """Direction of the transform."""
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @classmethod
    def coerce(cls, value: Union['Mode', str]) -> 'Mode':
        """
        Accept a Mode or its string value.

        Raises:
            ValueError: If the value names no mode
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Invalid mode: {value!r}. Must be one of: "
                f"{', '.join(m.value for m in cls)}"
            ) from None


def effective_shift(shift: int, mode: Union[Mode, str]) -> int:
    """Signed shift for a mode: negative to encrypt, positive to decrypt."""
    return -shift if Mode.coerce(mode) is Mode.ENCRYPT else shift


def _build_table(offset: int) -> bytes:
    # Python's % already maps negative values into 0..255
    return bytes((value + offset) % 256 for value in range(256))


def transform(data: Union[BytesLike, Iterable[int]], shift: int,
              mode: Union[Mode, str]) -> bytes:
    """
    Shift every byte of a buffer.

    Args:
        data: Input bytes (any bytes-like object or iterable of 0-255 ints)
        shift: Derived shift; zero is the identity
        mode: Mode.ENCRYPT / Mode.DECRYPT or "encrypt" / "decrypt"

    Returns:
        New bytes object of the same length

    Example:
        >>> transform(b"\\x00", 1, Mode.ENCRYPT)
        b'\\xff'
    """
    return ByteShiftCodec(shift, mode).transform(data)


class ByteShiftCodec:
    """
    Shift and mode bound to a precomputed translation table.

    Instances are immutable and can be shared between threads.

    Example:
        codec = ByteShiftCodec(10, Mode.ENCRYPT)
        with open(src, 'rb') as f:
            for chunk in codec.transform_stream(iter(lambda: f.read(65536), b'')):
                out.write(chunk)
    """

    def __init__(self, shift: int, mode: Union[Mode, str]):
        self._shift = shift
        self._mode = Mode.coerce(mode)
        self._table = _build_table(effective_shift(shift, self._mode))

    @property
    def shift(self) -> int:
        return self._shift

    @property
    def mode(self) -> Mode:
        return self._mode

    def transform(self, data: Union[BytesLike, Iterable[int]]) -> bytes:
        """Transform a whole buffer."""
        return bytes(data).translate(self._table)

    def transform_stream(self, chunks: Iterable[BytesLike]) -> Iterator[bytes]:
        """Lazily transform an iterable of chunks, one output chunk per input chunk."""
        for chunk in chunks:
            yield bytes(chunk).translate(self._table)

    def inverse(self) -> 'ByteShiftCodec':
        """Codec that undoes this one."""
        other = Mode.DECRYPT if self._mode is Mode.ENCRYPT else Mode.ENCRYPT
        return ByteShiftCodec(self._shift, other)

    def __repr__(self) -> str:
        return f"ByteShiftCodec(shift={self._shift}, mode={self._mode.value!r})"
